# =================================================================
#
# Authors: Tom Kralidis <tomkralidis@gmail.com>
#
# Copyright (c) 2025 Tom Kralidis
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation
# files (the "Software"), to deal in the Software without
# restriction, including without limitation the rights to use,
# copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY,
# WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
# =================================================================

"""Well-known default gridsets"""

from enum import Enum
import logging
import math
from typing import Dict, List, Union

from pygeogridset.crs import EPSG3857, EPSG4326
from pygeogridset.exception import ConfigurationError
from pygeogridset.gridset_factory import DEFAULT_LEVELS, create_grid_set
from pygeogridset.models.gridset import WORLD3857, WORLD4326, GridSet
from pygeogridset.source.base import BaseGridSetSource

LOGGER = logging.getLogger(__name__)

GLOBAL_CRS84_GEOMETRIC = 'GlobalCRS84Geometric'
GOOGLE_MAPS_COMPATIBLE = 'GoogleMapsCompatible'
EPSG4326_NAME = 'EPSG:4326'
EPSG3857_NAME = 'EPSG:3857'
EPSG900913_NAME = 'EPSG:900913'

MERCATOR_LEVELS = 31

GEOGRAPHIC_DESCRIPTION = (
    'A default WGS84 tile matrix set where the first zoom level covers the '
    'world with two tiles on the horizontal axis and one tile on the '
    'vertical axis, each subsequent zoom level halving the resolution of '
    'the previous one. Tiles are {size}x{size} pixels.'
)

MERCATOR_DESCRIPTION = (
    'Well-known scale set compatible with the Google Maps and Microsoft '
    'Live Map projections and zoom levels. Level 0 represents the whole '
    'world in a single tile of {size}x{size} pixels, the next level in 2x2 '
    'tiles of {size}x{size} pixels and so on in powers of 2. The scale '
    'denominator is only accurate near the equator.'
)


class GridSetNaming(str, Enum):
    """How a default gridset is named"""

    # CRS authority code, i.e. EPSG:4326
    LEGACY_EPSG_CODE = 'legacy'
    # descriptive name, i.e. GlobalCRS84Geometric
    MODERN_NAME = 'modern'


Naming = Union[GridSetNaming, str]


class DefaultGridsets(BaseGridSetSource):
    """
    Factory and source of the default world gridsets

    Only the plain geographic and mercator gridsets are contributed to a
    broker; the x2 variants are available through `world_epsg4326x2` and
    `world_epsg3857x2`.
    """

    def __init__(
        self,
        geographic_naming: Naming = GridSetNaming.MODERN_NAME,
        mercator_naming: Naming = GridSetNaming.MODERN_NAME,
        epsg900913_alias: bool = False
    ):
        """
        Initialize object

        :param geographic_naming: naming of the WGS84 geographic gridset
        :param mercator_naming: naming of the spherical mercator gridset
        :param epsg900913_alias: also resolve EPSG:900913 to the mercator
                                 gridset, only with legacy mercator naming

        :returns: pygeogridset.default_gridsets.DefaultGridsets
        """

        super().__init__({'name': 'Defaults'})

        try:
            self.geographic_naming = GridSetNaming(geographic_naming)
            self.mercator_naming = GridSetNaming(mercator_naming)
        except ValueError as err:
            raise ConfigurationError(f'Invalid gridset naming: {err}')

        self.epsg900913_alias = epsg900913_alias

        if self.geographic_naming == GridSetNaming.LEGACY_EPSG_CODE:
            self.geographic_name = EPSG4326_NAME
        else:
            self.geographic_name = GLOBAL_CRS84_GEOMETRIC

        if self.mercator_naming == GridSetNaming.LEGACY_EPSG_CODE:
            self.mercator_name = EPSG3857_NAME
        else:
            self.mercator_name = GOOGLE_MAPS_COMPATIBLE

        self._world_epsg4326 = self._geographic(self.geographic_name, 256)
        self._world_epsg4326x2 = self._geographic(
            f'{self.geographic_name}x2', 512)
        self._world_epsg3857 = self._mercator(self.mercator_name, 256)
        self._world_epsg3857x2 = self._mercator(
            f'{self.mercator_name}x2', 512)

    @classmethod
    def from_definition(cls, source_def: dict) -> 'DefaultGridsets':
        return cls(
            geographic_naming=source_def.get(
                'geographic_naming', GridSetNaming.MODERN_NAME),
            mercator_naming=source_def.get(
                'mercator_naming', GridSetNaming.MODERN_NAME),
            epsg900913_alias=source_def.get('epsg900913_alias', False)
        )

    @staticmethod
    def _geographic(name: str, tile_size: int) -> GridSet:
        return create_grid_set(
            name, EPSG4326, WORLD4326,
            levels=DEFAULT_LEVELS,
            tile_width=tile_size,
            tile_height=tile_size,
            description=GEOGRAPHIC_DESCRIPTION.format(size=tile_size)
        )

    @staticmethod
    def _mercator(name: str, tile_size: int) -> GridSet:
        return create_grid_set(
            name, EPSG3857, WORLD3857,
            levels=MERCATOR_LEVELS,
            tile_width=tile_size,
            tile_height=tile_size,
            description=MERCATOR_DESCRIPTION.format(size=tile_size)
        )

    def world_epsg4326(self) -> GridSet:
        """WGS84 geographic gridset, 256x256 tiles"""
        return self._world_epsg4326

    def world_epsg4326x2(self) -> GridSet:
        """WGS84 geographic gridset, 512x512 tiles"""
        return self._world_epsg4326x2

    def world_epsg3857(self) -> GridSet:
        """Spherical mercator gridset, 256x256 tiles"""
        return self._world_epsg3857

    def world_epsg3857x2(self) -> GridSet:
        """Spherical mercator gridset, 512x512 tiles"""
        return self._world_epsg3857x2

    def get_grid_sets(self) -> List[GridSet]:
        return [self._world_epsg4326, self._world_epsg3857]

    def get_aliases(self) -> Dict[str, str]:
        aliases = {}
        if self.geographic_naming == GridSetNaming.LEGACY_EPSG_CODE:
            aliases[EPSG4326_NAME] = self.geographic_name
        if self.mercator_naming == GridSetNaming.LEGACY_EPSG_CODE:
            aliases[EPSG3857_NAME] = self.mercator_name
            if self.epsg900913_alias:
                aliases[EPSG900913_NAME] = self.mercator_name
        return aliases


def check_x2_variant(base: GridSet, x2: GridSet,
                     rel_tol: float = 1e-6) -> None:
    """
    Check that a gridset is the double tile size variant of another

    :param base: `GridSet`
    :param x2: `GridSet` expected to double the tile size of `base`
    :param rel_tol: relative tolerance on scale denominators

    :raises `ConfigurationError`: if the gridsets are not related
    """

    if (base.srs, base.extent, base.num_levels) != (
            x2.srs, x2.extent, x2.num_levels):
        raise ConfigurationError(
            f'{x2.name} does not share CRS, extent and levels with '
            f'{base.name}')

    if (x2.tile_width, x2.tile_height) != (
            base.tile_width * 2, base.tile_height * 2):
        raise ConfigurationError(
            f'{x2.name} tiles are {x2.tile_width}x{x2.tile_height}, '
            f'expected double of {base.tile_width}x{base.tile_height}')

    for level, (grid, grid_x2) in enumerate(zip(base.levels, x2.levels)):
        if not math.isclose(grid.scale_denominator,
                            grid_x2.scale_denominator * 2, rel_tol=rel_tol):
            raise ConfigurationError(
                f'Level {level} of {x2.name} has scale denominator '
                f'{grid_x2.scale_denominator}, expected half of '
                f'{grid.scale_denominator}')
