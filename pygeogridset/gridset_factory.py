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

"""Construction of gridsets from resolutions, scales or level counts"""

import logging
from typing import List, Optional, Sequence, Union

from pydantic import ValidationError

from pygeogridset import scale
from pygeogridset.crs import SRS, get_meters_per_unit, is_y_coordinate_first
from pygeogridset.exception import GridSetValidationError
from pygeogridset.models.gridset import (BoundingBox, Grid, GridSet,
                                         matrix_size)

LOGGER = logging.getLogger(__name__)

DEFAULT_LEVELS = 22


def level_zero_resolution(extent: BoundingBox, tile_width: int,
                          tile_height: int) -> float:
    """
    Resolution at which the extent fits a single row (or column) of tiles

    An extent twice as wide as high (i.e. the whole world in degrees) is
    covered by two tiles side by side.

    :param extent: `BoundingBox` of the gridset
    :param tile_width: tile width in pixels
    :param tile_height: tile height in pixels

    :returns: `float` of CRS units per pixel
    """

    ratio = extent.width / extent.height
    if ratio >= 1:
        tiles_wide = max(round(ratio), 1)
        return max(extent.width / (tile_width * tiles_wide),
                   extent.height / tile_height)

    tiles_high = max(round(1 / ratio), 1)
    return max(extent.width / tile_width,
               extent.height / (tile_height * tiles_high))


def create_grid_set(name: str, srs: Union[SRS, int, str],
                    extent: Union[BoundingBox, Sequence[float]], *,
                    resolutions: Optional[Sequence[float]] = None,
                    scale_denominators: Optional[Sequence[float]] = None,
                    levels: Optional[int] = None,
                    tile_width: int = 256, tile_height: int = 256,
                    meters_per_unit: Optional[float] = None,
                    pixel_size: float = scale.STANDARDIZED_PIXEL_SIZE,
                    align_top_left: bool = False,
                    y_coordinate_first: Optional[bool] = None,
                    description: Optional[str] = None,
                    grid_names: Optional[List[str]] = None) -> GridSet:
    """
    Create a gridset

    Exactly one of `resolutions`, `scale_denominators` or `levels` must be
    given. With `levels`, level 0 covers the extent with one row of tiles
    and each following level halves the resolution.

    :param name: gridset name
    :param srs: `SRS`, EPSG number or `AUTH:CODE` string
    :param extent: `BoundingBox` or [minx, miny, maxx, maxy]
    :param resolutions: CRS units per pixel of each level
    :param scale_denominators: scale denominator of each level
    :param levels: number of levels
    :param tile_width: tile width in pixels
    :param tile_height: tile height in pixels
    :param meters_per_unit: metres per CRS unit, derived from the CRS if
                            not given
    :param pixel_size: standardized pixel size in metres
    :param align_top_left: anchor tile matrices at the top left corner of
                           the extent instead of the bottom left one
    :param y_coordinate_first: axis order of the CRS, derived if not given
    :param description: human readable description
    :param grid_names: name of each level, `<name>:<level>` by default

    :raises `GridSetValidationError`: on invalid input

    :returns: `GridSet`
    """

    given = [arg for arg in (resolutions, scale_denominators, levels)
             if arg is not None]
    if len(given) != 1:
        raise GridSetValidationError(
            f'Gridset {name}: exactly one of resolutions, '
            'scale_denominators or levels is required')

    srs = SRS.parse(srs)

    try:
        if not isinstance(extent, BoundingBox):
            extent = BoundingBox.from_list(extent)
    except (TypeError, ValueError) as err:
        raise GridSetValidationError(f'Gridset {name}: {err}') from err

    if tile_width <= 0 or tile_height <= 0:
        raise GridSetValidationError(
            f'Gridset {name}: tile size must be positive, got '
            f'{tile_width}x{tile_height}')

    scale_warning = False
    if meters_per_unit is None:
        meters_per_unit = get_meters_per_unit(srs)
        if meters_per_unit is None:
            LOGGER.warning(f'Gridset {name}: unable to determine the units '
                           f'of {srs}, assuming 1 metre per map unit')
            scale_warning = True
            meters_per_unit = 1.0

    if y_coordinate_first is None:
        y_coordinate_first = is_y_coordinate_first(srs)

    if levels is not None:
        if levels < 1:
            raise GridSetValidationError(
                f'Gridset {name}: at least one level is required')
        res0 = level_zero_resolution(extent, tile_width, tile_height)
        resolutions = [res0 / 2 ** level for level in range(levels)]
    elif scale_denominators is not None:
        resolutions = [
            scale.resolution(denom, meters_per_unit, pixel_size)
            for denom in scale_denominators
        ]

    if grid_names is not None and len(grid_names) != len(resolutions):
        raise GridSetValidationError(
            f'Gridset {name}: {len(grid_names)} grid names given for '
            f'{len(resolutions)} levels')

    try:
        grids = []
        for level, res in enumerate(resolutions):
            denom = scale.scale_denominator(res, meters_per_unit, pixel_size)
            grids.append(Grid(
                name=grid_names[level] if grid_names else f'{name}:{level}',
                resolution=res,
                scale_denominator=denom,
                num_tiles_wide=matrix_size(extent.width, res, tile_width),
                num_tiles_high=matrix_size(extent.height, res, tile_height)
            ))

        grid_set = GridSet(
            name=name,
            srs=srs,
            extent=extent,
            tile_width=tile_width,
            tile_height=tile_height,
            levels=grids,
            description=description or '',
            scale_warning=scale_warning,
            meters_per_unit=meters_per_unit,
            pixel_size=pixel_size,
            y_coordinate_first=y_coordinate_first,
            align_top_left=align_top_left
        )
    except ValidationError as err:
        raise GridSetValidationError(f'Gridset {name}: {err}') from err

    LOGGER.debug(f'Created gridset {name} with {grid_set.num_levels} levels')
    return grid_set
