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

"""Conversions between ground resolution and map scale denominator"""

import math

from pygeogridset.exception import GridSetValidationError

#: OGC standardized rendering pixel size, in metres (0.28mm)
STANDARDIZED_PIXEL_SIZE = 0.00028


def _check_positive(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise GridSetValidationError(f'{name} must be a number, got {value!r}')

    if not math.isfinite(value) or value <= 0:
        raise GridSetValidationError(
            f'{name} must be a positive finite number, got {value!r}')

    return value


def scale_denominator(resolution: float, meters_per_unit: float,
                      pixel_size: float = STANDARDIZED_PIXEL_SIZE) -> float:
    """
    Compute the nominal scale denominator of a resolution

    :param resolution: CRS units per pixel
    :param meters_per_unit: length of one CRS unit in metres
    :param pixel_size: standardized rendering pixel size in metres

    :returns: `float` scale denominator (the N in 1:N)
    """

    resolution = _check_positive('resolution', resolution)
    meters_per_unit = _check_positive('meters_per_unit', meters_per_unit)
    pixel_size = _check_positive('pixel_size', pixel_size)

    return resolution * meters_per_unit / pixel_size


def resolution(scale_denominator: float, meters_per_unit: float,
               pixel_size: float = STANDARDIZED_PIXEL_SIZE) -> float:
    """
    Compute the resolution matching a nominal scale denominator

    :param scale_denominator: scale denominator (the N in 1:N)
    :param meters_per_unit: length of one CRS unit in metres
    :param pixel_size: standardized rendering pixel size in metres

    :returns: `float` of CRS units per pixel
    """

    scale_denominator = _check_positive('scale_denominator',
                                        scale_denominator)
    meters_per_unit = _check_positive('meters_per_unit', meters_per_unit)
    pixel_size = _check_positive('pixel_size', pixel_size)

    return scale_denominator * pixel_size / meters_per_unit
