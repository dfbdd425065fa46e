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

"""Registry of gridsets by name"""

import logging
from types import MappingProxyType
from typing import Iterable, List, Optional, Set

import click

from pygeogridset.config import read_config, validate_config
from pygeogridset.default_gridsets import DefaultGridsets
from pygeogridset.exception import ConfigurationError
from pygeogridset.log import setup_logger
from pygeogridset.models.gridset import GridSet
from pygeogridset.plugin import load_plugin
from pygeogridset.source.base import BaseGridSetSource
from pygeogridset.util import to_json

LOGGER = logging.getLogger(__name__)


class GridSetBroker:
    """
    Read-only registry resolving gridset names and aliases

    All registration happens in the constructor; a broker is never modified
    afterwards and can be shared between threads. Reloading gridsets means
    building a new broker and swapping the reference.
    """

    def __init__(self, sources: Iterable[BaseGridSetSource]):
        """
        Initialize object

        :param sources: gridset sources, exactly one of which (the first
                        one wins) being a `DefaultGridsets`

        :raises `ConfigurationError`: on duplicate names, clashing aliases
                                      or missing default gridsets

        :returns: pygeogridset.broker.GridSetBroker
        """

        by_name = {}
        aliases = {}
        defaults = None

        for source in sources:
            LOGGER.debug(f'Registering gridsets of {source!r}')
            if defaults is None and isinstance(source, DefaultGridsets):
                defaults = source

            for grid_set in source.get_grid_sets():
                if grid_set.name in by_name:
                    msg = f'Duplicate gridset name {grid_set.name}'
                    LOGGER.error(msg)
                    raise ConfigurationError(msg)
                by_name[grid_set.name] = grid_set

            for alias, target in source.get_aliases().items():
                if aliases.get(alias, target) != target:
                    msg = (f'Alias {alias} maps to both {aliases[alias]} '
                           f'and {target}')
                    LOGGER.error(msg)
                    raise ConfigurationError(msg)
                aliases[alias] = target

        if defaults is None:
            msg = 'No default gridsets source registered'
            LOGGER.error(msg)
            raise ConfigurationError(msg)

        for alias, target in aliases.items():
            if target not in by_name:
                msg = f'Alias {alias} refers to unknown gridset {target}'
                LOGGER.error(msg)
                raise ConfigurationError(msg)
            if alias in by_name and alias != target:
                msg = f'Alias {alias} shadows gridset {alias}'
                LOGGER.error(msg)
                raise ConfigurationError(msg)

        self._by_name = MappingProxyType(by_name)
        self._aliases = MappingProxyType(aliases)
        self.canonical_geographic_name = defaults.geographic_name
        self.canonical_mercator_name = defaults.mercator_name

        LOGGER.debug(f'Gridsets: {sorted(by_name)}, aliases: {aliases}')

    def get(self, name: str) -> Optional[GridSet]:
        """
        Look up a gridset by name, then by alias

        :param name: gridset name or alias

        :returns: `GridSet` or `None` if unknown
        """

        if not isinstance(name, str):
            return None

        grid_set = self._by_name.get(name)
        if grid_set is None and name in self._aliases:
            grid_set = self._by_name[self._aliases[name]]
        return grid_set

    def get_world_epsg4326(self) -> GridSet:
        """Default WGS84 geographic gridset, whatever its name"""
        return self._by_name[self.canonical_geographic_name]

    def get_world_epsg3857(self) -> GridSet:
        """Default spherical mercator gridset, whatever its name"""
        return self._by_name[self.canonical_mercator_name]

    def get_grid_sets(self) -> Set[GridSet]:
        return set(self._by_name.values())

    def get_names(self) -> List[str]:
        return sorted(self._by_name)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __repr__(self):
        return f'<GridSetBroker> {self.get_names()}'


def get_broker(config: dict) -> GridSetBroker:
    """
    Build a broker from configuration

    :param config: configuration `dict`, whose optional `gridsets` section
                   holds the `defaults` naming options and extra `sources`

    :raises `ConfigurationError`: on invalid gridsets

    :returns: `GridSetBroker`
    """

    gridsets_config = config.get('gridsets') or {}

    sources = [
        load_plugin('source', {
            'name': 'Defaults', **(gridsets_config.get('defaults') or {})
        })
    ]
    for source_def in gridsets_config.get('sources', []):
        sources.append(load_plugin('source', source_def))

    return GridSetBroker(sources)


def _cli_broker(config_file: str) -> GridSetBroker:
    if config_file is None:
        raise click.ClickException('--config/-c required')

    instance = read_config(config_file)
    validate_config(instance)
    if 'logging' in instance:
        setup_logger(instance['logging'])

    return get_broker(instance)


@click.group()
def gridset():
    """Gridset registry"""
    pass


@click.command('list')
@click.pass_context
@click.option('--config', '-c', 'config_file', help='configuration file')
def list_(ctx, config_file):
    """List registered gridsets"""

    broker = _cli_broker(config_file)
    for name in broker.get_names():
        grid_set = broker.get(name)
        click.echo(f'{name} ({grid_set.srs}, {grid_set.num_levels} levels, '
                   f'{grid_set.tile_width}x{grid_set.tile_height})')


@click.command()
@click.pass_context
@click.argument('name')
@click.option('--config', '-c', 'config_file', help='configuration file')
def show(ctx, name, config_file):
    """Show a gridset as JSON"""

    grid_set = _cli_broker(config_file).get(name)
    if grid_set is None:
        raise click.ClickException(f'Gridset {name} not found')

    click.echo(to_json(grid_set, pretty=True))


gridset.add_command(list_)
gridset.add_command(show)
