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

import logging
from typing import Iterable, List

from pygeogridset.exception import ConfigurationError
from pygeogridset.models.gridset import GridSet
from pygeogridset.source.base import BaseGridSetSource

LOGGER = logging.getLogger(__name__)


class StaticGridSetSource(BaseGridSetSource):
    """Source of ready made gridsets"""

    def __init__(self, grid_sets: Iterable[GridSet] = (),
                 name: str = 'Static'):
        """
        Initialize object

        :param grid_sets: gridsets to contribute
        :param name: source name

        :raises `ConfigurationError`: if an item is not a `GridSet`

        :returns: pygeogridset.source.static.StaticGridSetSource
        """

        super().__init__({'name': name})
        self._grid_sets = tuple(grid_sets)

        for grid_set in self._grid_sets:
            if not isinstance(grid_set, GridSet):
                msg = f'{name}: expected a GridSet, got {grid_set!r}'
                LOGGER.error(msg)
                raise ConfigurationError(msg)

    @classmethod
    def from_definition(cls, source_def: dict) -> 'StaticGridSetSource':
        return cls(source_def.get('gridsets', ()),
                   name=source_def.get('name', 'Static'))

    def get_grid_sets(self) -> List[GridSet]:
        return list(self._grid_sets)
