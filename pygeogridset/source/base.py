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
from typing import Dict, List

from pygeogridset.models.gridset import GridSet

LOGGER = logging.getLogger(__name__)


class BaseGridSetSource:
    """generic gridset source ABC"""

    def __init__(self, source_def: dict = None):
        """
        Initialize object

        :param source_def: source definition

        :returns: pygeogridset.source.base.BaseGridSetSource
        """

        source_def = source_def or {}
        self.name = source_def.get('name', self.__class__.__name__)

    @classmethod
    def from_definition(cls, source_def: dict) -> 'BaseGridSetSource':
        """
        Create a source from a configuration definition

        :param source_def: source definition

        :returns: source instance
        """

        return cls(source_def)

    def get_grid_sets(self) -> List[GridSet]:
        """
        Gridsets contributed by this source

        :returns: `list` of `GridSet`
        """

        raise NotImplementedError()

    def get_aliases(self) -> Dict[str, str]:
        """
        Alternative names of the contributed gridsets

        :returns: `dict` of alias to gridset name
        """

        return {}

    def __repr__(self):
        return f'<{self.__class__.__name__}> {self.name}'
