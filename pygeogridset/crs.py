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

"""CRS metadata needed to lay out gridsets"""

import functools
import logging
import math
from typing import Optional, Union

import pyproj
from pydantic import BaseModel, ConfigDict, Field
from pyproj.exceptions import CRSError

LOGGER = logging.getLogger(__name__)


class SRS(BaseModel):
    """Spatial reference system of a gridset, identified by authority code"""

    model_config = ConfigDict(frozen=True)

    authority: str = 'EPSG'
    number: int = Field(ge=0)

    def __str__(self) -> str:
        return f'{self.authority}:{self.number}'

    @classmethod
    def parse(cls, value: Union['SRS', int, str]) -> 'SRS':
        """
        Parse an SRS from an authority code

        :param value: `SRS`, EPSG number, `AUTH:CODE` string or OGC CRS URI

        :returns: `SRS` instance
        """

        if isinstance(value, SRS):
            return value

        if isinstance(value, int):
            return cls(number=value)

        uri = str(value).strip()
        if uri.startswith(('http', 'urn:')):
            url = uri.replace(
                'urn:ogc:def:crs', 'http://www.opengis.net/def/crs'
            ).replace(':', '/')
            parts = url.rsplit('/', maxsplit=3)[1::2]
        else:
            parts = uri.split(':')

        try:
            authority, code = parts
            return cls(authority=authority.upper(), number=int(code))
        except ValueError:
            msg = f'SRS could not be identified from {uri!r}'
            LOGGER.error(msg)
            raise CRSError(msg)

    def to_crs(self) -> pyproj.CRS:
        """
        Get a `pyproj.CRS` instance for this SRS

        :raises `CRSError`: when the code is unknown to PROJ

        :returns: `pyproj.CRS`
        """

        return get_crs(self.authority, self.number)


@functools.lru_cache(maxsize=64)
def get_crs(authority: str, code: int) -> pyproj.CRS:
    """
    Get a `pyproj.CRS` instance from an authority code

    :param authority: authority name (i.e. EPSG)
    :param code: code within the authority

    :raises `CRSError`: Error raised if no CRS could be identified

    :returns: `pyproj.CRS` instance
    """

    try:
        return pyproj.CRS.from_authority(authority, str(code))
    except CRSError:
        msg = f'CRS could not be identified from {authority}:{code}'
        LOGGER.error(msg)
        raise CRSError(msg)


def get_meters_per_unit(srs: SRS) -> Optional[float]:
    """
    Length of one CRS unit in metres

    Geographic CRSs in degrees use the length of one degree along the
    equator of the CRS ellipsoid.

    :param srs: `SRS` instance

    :returns: `float` of metres per unit, or `None` if unknown
    """

    try:
        crs = srs.to_crs()
    except CRSError:
        LOGGER.debug(f'Unknown CRS {srs}, meters per unit is undefined')
        return None

    if not crs.axis_info:
        return None

    axis = crs.axis_info[0]

    if crs.is_geographic:
        if crs.ellipsoid is None:
            return None
        semi_major = crs.ellipsoid.semi_major_metre
        if axis.unit_name == 'degree':
            return semi_major * 2.0 * math.pi / 360.0
        # radians per unit
        return semi_major * axis.unit_conversion_factor

    if axis.unit_conversion_factor:
        return axis.unit_conversion_factor

    return None


def is_y_coordinate_first(srs: SRS) -> bool:
    """
    Whether the CRS declares its northing axis first (i.e. lat/lon)

    :param srs: `SRS` instance

    :returns: `bool`
    """

    try:
        crs = srs.to_crs()
    except CRSError:
        return False

    if not crs.axis_info:
        return False

    return crs.axis_info[0].direction.lower() in ('north', 'south')


EPSG4326 = SRS(number=4326)
EPSG3857 = SRS(number=3857)
