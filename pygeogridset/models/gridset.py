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

import math
from typing import Tuple

from pydantic import (BaseModel, ConfigDict, Field, field_validator,
                      model_validator)

from pygeogridset.crs import SRS
from pygeogridset.scale import STANDARDIZED_PIXEL_SIZE


def _finite_positive(value: float) -> float:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f'must be a positive finite number, got {value}')
    return value


def matrix_size(length: float, resolution: float, tile_size: int) -> int:
    """
    Number of tiles needed to cover a length at a resolution

    Up to 1% of a tile overlap is tolerated to absorb rounding in the
    resolution.

    :param length: extent length in CRS units
    :param resolution: CRS units per pixel
    :param tile_size: tile length in pixels

    :returns: `int` of tiles
    """

    tile_span = resolution * tile_size
    return max(math.ceil((length - tile_span * 0.01) / tile_span), 1)


class BoundingBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @model_validator(mode='after')
    def check_ordered(self) -> 'BoundingBox':
        if not (self.min_x < self.max_x and self.min_y < self.max_y):
            raise ValueError(
                f'Invalid bounding box {self.to_list()}: minimums must be '
                'lower than maximums')
        return self

    @classmethod
    def from_list(cls, bbox) -> 'BoundingBox':
        min_x, min_y, max_x, max_y = bbox
        return cls(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)

    def to_list(self) -> list:
        return [self.min_x, self.min_y, self.max_x, self.max_y]

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


WORLD4326 = BoundingBox(min_x=-180.0, min_y=-90.0, max_x=180.0, max_y=90.0)
WORLD3857 = BoundingBox(min_x=-20037508.34, min_y=-20037508.34,
                        max_x=20037508.34, max_y=20037508.34)


class Grid(BaseModel):
    """One zoom level of a gridset"""

    model_config = ConfigDict(frozen=True)

    name: str
    resolution: float
    scale_denominator: float
    num_tiles_wide: int = Field(ge=1)
    num_tiles_high: int = Field(ge=1)

    @field_validator('resolution', 'scale_denominator')
    @classmethod
    def check_positive(cls, value: float) -> float:
        return _finite_positive(value)


class GridSet(BaseModel):
    """
    Immutable named tile pyramid over one CRS

    Level 0 is the first entry of `levels`. Instances are created by
    `pygeogridset.gridset_factory.create_grid_set` which derives the
    per-level scale denominators and tile matrix sizes.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    srs: SRS
    extent: BoundingBox
    tile_width: int = Field(gt=0)
    tile_height: int = Field(gt=0)
    levels: Tuple[Grid, ...] = Field(min_length=1)
    description: str = ''
    scale_warning: bool = False
    meters_per_unit: float = 1.0
    pixel_size: float = STANDARDIZED_PIXEL_SIZE
    y_coordinate_first: bool = False
    align_top_left: bool = False

    @field_validator('meters_per_unit', 'pixel_size')
    @classmethod
    def check_positive(cls, value: float) -> float:
        return _finite_positive(value)

    @model_validator(mode='after')
    def check_levels(self) -> 'GridSet':
        resolutions = self.resolutions
        steps = [b - a for a, b in zip(resolutions, resolutions[1:])]
        if not (all(s < 0 for s in steps) or all(s > 0 for s in steps)):
            raise ValueError(
                f'Resolutions of gridset {self.name} are not strictly '
                f'monotonic: {resolutions}')

        for level, grid in enumerate(self.levels):
            wide = matrix_size(self.extent.width, grid.resolution,
                               self.tile_width)
            high = matrix_size(self.extent.height, grid.resolution,
                               self.tile_height)
            if (grid.num_tiles_wide, grid.num_tiles_high) != (wide, high):
                raise ValueError(
                    f'Level {level} of gridset {self.name} declares a '
                    f'{grid.num_tiles_wide}x{grid.num_tiles_high} tile '
                    f'matrix, the extent requires {wide}x{high}')
        return self

    def __hash__(self) -> int:
        return hash(self.name)

    @property
    def num_levels(self) -> int:
        return len(self.levels)

    @property
    def resolutions(self) -> list:
        return [grid.resolution for grid in self.levels]

    @property
    def scale_denominators(self) -> list:
        return [grid.scale_denominator for grid in self.levels]

    def get_grid(self, level: int) -> Grid:
        """
        Get one level of the gridset

        :param level: zoom level index

        :raises `IndexError`: if the level is out of range

        :returns: `Grid`
        """

        if not 0 <= level < self.num_levels:
            raise IndexError(
                f'Gridset {self.name} has no level {level}, valid levels '
                f'are 0-{self.num_levels - 1}')

        return self.levels[level]

    def _top_left_corner(self, level: int) -> Tuple[float, float]:
        grid = self.get_grid(level)
        if self.align_top_left:
            return self.extent.min_x, self.extent.max_y

        # matrix grows upwards from the bottom left corner of the extent
        top = (self.extent.min_y +
               grid.resolution * self.tile_height * grid.num_tiles_high)
        return self.extent.min_x, top

    def get_ordered_top_left_corner(self, level: int) -> Tuple[float, float]:
        """
        Top left corner of a level's tile matrix, in the CRS axis order

        :param level: zoom level index

        :returns: `tuple` of corner coordinates, (y, x) when the CRS
                  declares its northing axis first
        """

        x, y = self._top_left_corner(level)
        if self.y_coordinate_first:
            return y, x
        return x, y

    def get_tile_bounds(self, x: int, y: int, level: int) -> BoundingBox:
        """
        Bounds of a tile

        Columns are counted from the left and rows from the bottom of the
        level's tile matrix.

        :param x: tile column
        :param y: tile row
        :param level: zoom level index

        :raises `IndexError`: if the tile is outside of the matrix

        :returns: `BoundingBox` of the tile in CRS units
        """

        grid = self.get_grid(level)
        if not (0 <= x < grid.num_tiles_wide and
                0 <= y < grid.num_tiles_high):
            raise IndexError(
                f'Tile {x},{y} is outside of the {grid.num_tiles_wide}x'
                f'{grid.num_tiles_high} matrix of level {level}')

        span_x = grid.resolution * self.tile_width
        span_y = grid.resolution * self.tile_height
        left, top = self._top_left_corner(level)
        bottom = top - span_y * grid.num_tiles_high

        min_x = left + round(x * span_x, 12)
        min_y = bottom + round(y * span_y, 12)
        return BoundingBox(min_x=min_x, min_y=min_y,
                           max_x=min_x + round(span_x, 12),
                           max_y=min_y + round(span_y, 12))

    def get_closest_level(self, resolution: float) -> int:
        """
        Level that offers the requested resolution or a finer one

        :param resolution: requested CRS units per pixel

        :returns: `int` of the coarsest level at least as fine as the
                  request, or the finest level if none is
        """

        ordered = sorted(enumerate(self.resolutions),
                         key=lambda item: item[1], reverse=True)
        for level, res in ordered:
            if res <= resolution:
                return level
        return ordered[-1][0]
