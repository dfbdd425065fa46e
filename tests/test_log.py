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
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler

import pytest

from pygeogridset import log


def test_file_handler(tmp_path):
    logfile = str(tmp_path / 'pygeogridset.log')

    handler = log._file_handler({'logfile': logfile})
    assert isinstance(handler, logging.FileHandler)
    handler.close()

    handler = log._file_handler({
        'logfile': logfile,
        'rotation': {'mode': 'size', 'max_bytes': 1024, 'backup_count': 2}
    })
    assert isinstance(handler, RotatingFileHandler)
    assert handler.maxBytes == 1024
    handler.close()

    handler = log._file_handler({
        'logfile': logfile,
        'rotation': {'mode': 'time', 'when': 'd'}
    })
    assert isinstance(handler, TimedRotatingFileHandler)
    handler.close()

    with pytest.raises(ValueError):
        log._file_handler({'logfile': logfile, 'rotation': {'mode': 'x'}})


def test_setup_logger_invalid_level():
    with pytest.raises(ValueError):
        log.setup_logger({'level': 'VERBOSE'})
