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

import pytest
from pydantic import ValidationError

from pygeogridset.crs import EPSG3857, EPSG4326
from pygeogridset.gridset_factory import create_grid_set
from pygeogridset.models.gridset import (BoundingBox, Grid, GridSet,
                                         WORLD3857, WORLD4326, matrix_size)


@pytest.fixture()
def world4326():
    return create_grid_set('EPSG:4326', EPSG4326, WORLD4326, levels=4)


@pytest.fixture()
def world3857():
    return create_grid_set('EPSG:3857', EPSG3857, WORLD3857, levels=4)


def test_bounding_box():
    bbox = BoundingBox.from_list([-10, -5, 10, 5])
    assert bbox.width == 20
    assert bbox.height == 10
    assert bbox.to_list() == [-10, -5, 10, 5]

    with pytest.raises(ValidationError):
        BoundingBox.from_list([10, -5, -10, 5])

    with pytest.raises(ValidationError):
        BoundingBox.from_list([0, 0, 0, 0])


@pytest.mark.parametrize('length, resolution, tile_size, expected', [
    (360, 0.703125, 256, 2),
    (180, 0.703125, 256, 1),
    (480000, 50, 256, 38),
    # less than 1% of a tile over
    (256.5, 1, 256, 1),
    (270, 1, 256, 2),
    (10, 1000, 256, 1)
])
def test_matrix_size(length, resolution, tile_size, expected):
    assert matrix_size(length, resolution, tile_size) == expected


@pytest.mark.parametrize('values', [
    {'resolution': 0},
    {'resolution': -1},
    {'resolution': float('nan')},
    {'scale_denominator': float('inf')},
    {'num_tiles_wide': 0},
])
def test_grid_validation(values):
    grid_def = {
        'name': 'test:0',
        'resolution': 1.0,
        'scale_denominator': 3571.43,
        'num_tiles_wide': 1,
        'num_tiles_high': 1
    }
    grid_def.update(values)

    with pytest.raises(ValidationError):
        Grid(**grid_def)


def test_gridset(world4326):
    assert world4326.name == 'EPSG:4326'
    assert world4326.srs == EPSG4326
    assert world4326.num_levels == 4
    assert world4326.tile_width == 256
    assert world4326.tile_height == 256
    assert world4326.scale_warning is False
    assert world4326.y_coordinate_first is True
    assert world4326.resolutions == [
        0.703125, 0.3515625, 0.17578125, 0.087890625]
    assert world4326.scale_denominators[0] == \
        pytest.approx(279541132.0143589, rel=1e-12)

    grid = world4326.get_grid(0)
    assert grid.name == 'EPSG:4326:0'
    assert (grid.num_tiles_wide, grid.num_tiles_high) == (2, 1)

    grid = world4326.get_grid(3)
    assert (grid.num_tiles_wide, grid.num_tiles_high) == (16, 8)


@pytest.mark.parametrize('level', [-1, 4, 100])
def test_get_grid_out_of_range(world4326, level):
    with pytest.raises(IndexError):
        world4326.get_grid(level)


def test_gridset_is_frozen(world4326):
    with pytest.raises(ValidationError):
        world4326.name = 'other'

    with pytest.raises(ValidationError):
        world4326.get_grid(0).resolution = 1.0


def test_gridset_identity(world4326):
    same = create_grid_set('EPSG:4326', EPSG4326, WORLD4326, levels=4)
    assert same == world4326
    assert hash(same) == hash(world4326)
    assert len({same, world4326}) == 1


def test_gridset_validation(world4326):
    values = world4326.model_dump()

    reversed_ = dict(values, levels=list(reversed(values['levels'])))
    assert GridSet(**reversed_).resolutions[0] == 0.087890625

    unordered = dict(values, levels=[values['levels'][i]
                                     for i in (0, 2, 1, 3)])
    with pytest.raises(ValidationError):
        GridSet(**unordered)

    with pytest.raises(ValidationError):
        GridSet(**dict(values, levels=[]))

    with pytest.raises(ValidationError):
        GridSet(**dict(values, tile_width=0))

    # matrix size no longer matching the extent
    with pytest.raises(ValidationError):
        GridSet(**dict(values, tile_height=512))


def test_ordered_top_left_corner(world4326, world3857):
    # latitude first
    assert world4326.get_ordered_top_left_corner(0) == (90.0, -180.0)
    assert world4326.get_ordered_top_left_corner(3) == (90.0, -180.0)

    x, y = world3857.get_ordered_top_left_corner(0)
    assert x == pytest.approx(-20037508.34)
    assert y == pytest.approx(20037508.34)


def test_top_left_corner_of_partial_matrix():
    grid_set = create_grid_set('partial', EPSG3857, [0, 0, 1000, 300],
                               resolutions=[1.0])
    # the matrix grows upwards from the bottom left of the extent
    assert grid_set.get_grid(0).num_tiles_high == 2
    assert grid_set.get_ordered_top_left_corner(0) == (0.0, 512.0)

    aligned = create_grid_set('aligned', EPSG3857, [0, 0, 1000, 300],
                              resolutions=[1.0], align_top_left=True)
    assert aligned.get_ordered_top_left_corner(0) == (0.0, 300.0)


def test_tile_bounds(world4326, world3857):
    assert world4326.get_tile_bounds(0, 0, 0).to_list() == \
        [-180.0, -90.0, 0.0, 90.0]
    assert world4326.get_tile_bounds(1, 0, 0).to_list() == \
        [0.0, -90.0, 180.0, 90.0]
    assert world4326.get_tile_bounds(3, 1, 1).to_list() == \
        [90.0, 0.0, 180.0, 90.0]

    bounds = world3857.get_tile_bounds(1, 1, 1)
    assert bounds.min_x == pytest.approx(0.0, abs=1e-6)
    assert bounds.min_y == pytest.approx(0.0, abs=1e-6)
    assert bounds.max_x == pytest.approx(20037508.34)
    assert bounds.max_y == pytest.approx(20037508.34)

    with pytest.raises(IndexError):
        world4326.get_tile_bounds(2, 0, 0)

    with pytest.raises(IndexError):
        world4326.get_tile_bounds(0, -1, 0)


@pytest.mark.parametrize('resolution, expected', [
    (10.0, 0),
    (0.703125, 0),
    (0.5, 1),
    (0.3515625, 1),
    (0.1, 3),
    (0.0001, 3)
])
def test_closest_level(world4326, resolution, expected):
    assert world4326.get_closest_level(resolution) == expected
