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

from pygeogridset.config import read_config
from pygeogridset.default_gridsets import DefaultGridsets, GridSetNaming

from tests.util import get_test_file_path


@pytest.fixture()
def config():
    return read_config(get_test_file_path('data/pygeogridset-test-config.yml'))


@pytest.fixture(scope='session')
def legacy_defaults():
    return DefaultGridsets(
        geographic_naming=GridSetNaming.LEGACY_EPSG_CODE,
        mercator_naming=GridSetNaming.LEGACY_EPSG_CODE
    )


@pytest.fixture(scope='session')
def modern_defaults():
    return DefaultGridsets(
        geographic_naming=GridSetNaming.MODERN_NAME,
        mercator_naming=GridSetNaming.MODERN_NAME
    )
