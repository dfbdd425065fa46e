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

"""Gridsets defined in configuration"""

import logging
from typing import List

from pyproj.exceptions import CRSError

from pygeogridset.exception import ConfigurationError, GridSetValidationError
from pygeogridset.gridset_factory import create_grid_set
from pygeogridset.models.gridset import GridSet
from pygeogridset.source.base import BaseGridSetSource

LOGGER = logging.getLogger(__name__)

#: configuration keys passed through to the gridset factory
GRIDSET_OPTIONS = [
    'resolutions', 'scale_denominators', 'levels', 'tile_width',
    'tile_height', 'meters_per_unit', 'pixel_size', 'align_top_left',
    'y_coordinate_first', 'description', 'grid_names'
]


class ConfigGridSetSource(BaseGridSetSource):
    """User defined gridsets"""

    def __init__(self, source_def: dict):
        """
        Initialize object

        :param source_def: source definition, with a `gridsets` list of
                           gridset definitions

        :raises `ConfigurationError`: if a gridset definition is invalid

        :returns: pygeogridset.source.config.ConfigGridSetSource
        """

        super().__init__(source_def)
        self._grid_sets = [
            self._build(gridset_def)
            for gridset_def in source_def.get('gridsets', [])
        ]
        LOGGER.debug(f'{self.name}: {len(self._grid_sets)} gridsets defined')

    @staticmethod
    def _build(gridset_def: dict) -> GridSet:
        try:
            name = gridset_def['name']
            srs = gridset_def['srs']
            extent = gridset_def['extent']
        except KeyError as err:
            msg = f'Gridset definition is missing {err}: {gridset_def}'
            LOGGER.error(msg)
            raise ConfigurationError(msg)

        unknown = set(gridset_def) - set(GRIDSET_OPTIONS) - {
            'name', 'srs', 'extent'}
        if unknown:
            msg = f'Gridset {name}: unknown options {sorted(unknown)}'
            LOGGER.error(msg)
            raise ConfigurationError(msg)

        options = {
            key: value for key, value in gridset_def.items()
            if key in GRIDSET_OPTIONS
        }

        try:
            return create_grid_set(name, srs, extent, **options)
        except (CRSError, GridSetValidationError, TypeError) as err:
            msg = f'Invalid gridset {name}: {err}'
            LOGGER.error(msg)
            raise ConfigurationError(msg) from err

    def get_grid_sets(self) -> List[GridSet]:
        return list(self._grid_sets)
