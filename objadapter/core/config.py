from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Dict
from typing import Iterator
from typing import List
from typing import Optional
from typing import Tuple

import logging
import os
import pathlib

from ruamel.yaml import YAML

from objadapter.exceptions import ConfigurationLocked
from objadapter.exceptions import RequiredConfigOption
from objadapter.utils.imports import importstr
from objadapter.utils.schema import NA

Schema = Dict[str, Any]
Key = Tuple[str, ...]

yaml = YAML(typ='safe')

log = logging.getLogger(__name__)

SCHEMA: Schema = {
    'type': 'object',
    'items': yaml.load(
        (pathlib.Path(__file__).parent.parent / 'config.yml').read_text()
    ),
}

ENV_PREFIX = 'OBJADAPTER_'


def _split_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [v.strip() for v in value.split(',') if v.strip()]
    return list(value)


# Option types from config.yml and functions casting raw values to them.
CASTS: Dict[str, Callable[[Any], Any]] = {
    'string': str,
    'list': _split_list,
    'path': pathlib.Path,
}


def read_config(envfile=None, environ=None) -> RawConfig:
    """Read configuration from defaults, `.env` file and environment."""
    rc = RawConfig()
    rc.read([
        Path('objadapter', 'objadapter.config:CONFIG'),
        EnvFile('envfile', envfile or '.env'),
        EnvVars('envvars', os.environ if environ is None else environ),
    ])
    return rc


class ConfigSource:
    name: str = None
    config: Any

    def __init__(self, name=None, config=None):
        self.name = name or self.name or type(self).__name__
        self.config = config

    def __repr__(self):
        return f'{type(self).__name__}({self.name!r})'

    def read(self) -> None:
        # Nested dicts are flattened into tuple keys.
        self.config = dict(_flatten(self.config))

    def get(self, key: Key) -> Any:
        return self.config.get(key, NA)


class PyDict(ConfigSource):
    """Options given as a dict, keys can be nested or dotted.

        PyDict('app', {'columns.value': 'Amount'})
        PyDict('app', {'columns': {'value': 'Amount'}})

    """

    def read(self) -> None:
        self.config = {
            tuple(k.split('.')): v
            for k, v in self.config.items()
        }
        super().read()


class Path(PyDict):
    """Options read from a `module:NAME` python path or a YAML file."""

    def read(self) -> None:
        if self.config.endswith(('.yml', '.yaml')):
            self.config = yaml.load(pathlib.Path(self.config).read_text())
        else:
            self.config = importstr(self.config)
        super().read()


class EnvVars(ConfigSource):
    """Environment variables with `OBJADAPTER_` prefix.

    Nested keys are separated with double underscores, for example
    `OBJADAPTER_COLUMNS__VALUE` sets `columns.value` option.
    """

    name = 'env'

    def read(self) -> None:
        self.config = {
            tuple(key[len(ENV_PREFIX):].lower().split('__')): value
            for key, value in self.config.items()
            if key.startswith(ENV_PREFIX)
        }


class EnvFile(EnvVars):
    """Environment variables read from a `.env` file, if it exists."""

    def read(self) -> None:
        path = pathlib.Path(self.config)
        self.config = dict(_read_env_file(path)) if path.exists() else {}
        super().read()


class RawConfig:
    """A raw configuration reader component

    Reads configuration directly from supported configuration `sources`,
    options set in later sources override options set in earlier ones.

    Currently supported configuration sources are:

    - `PyDict` - python `dict` objects.
    - `Path` - python module path pointing to a `dict` or YAML file path.
    - `EnvVars` - environment variables with `OBJADAPTER_` prefix.
    - `EnvFile` - `.env` files containing variables with `OBJADAPTER_` prefix.

    Values are cast to types given in `objadapter/config.yml` and missing
    options default to values given there.

    """

    sources: List[ConfigSource]

    def __init__(self, sources: Optional[List[ConfigSource]] = None):
        self.sources = sources or []
        self._locked = False
        self._schema = SCHEMA

    def read(self, sources: List[ConfigSource]) -> RawConfig:
        if self._locked:
            raise ConfigurationLocked()
        for source in sources:
            log.info("Reading config from %s.", source.name)
            source.read()
        self.sources.extend(sources)
        return self

    def add(self, name: str, params: Dict[str, Any]) -> RawConfig:
        return self.read([PyDict(name, params)])

    def fork(self, params: Dict[str, Any] = None) -> RawConfig:
        """Return unlocked copy of this config with `params` on top."""
        rc = RawConfig(list(self.sources))
        if params:
            rc.add('fork', params)
        return rc

    def lock(self) -> None:
        self._locked = True

    def get(self, *key: str, default=NA, required=False) -> Any:
        schema = self._get_key_schema(key)
        value = self._get_config_value(key)
        if value is NA:
            value = schema.get('default', NA) if default is NA else default
        if value is NA or value is None:
            if required:
                raise RequiredConfigOption(option='.'.join(key))
            return None
        cast = CASTS.get(schema.get('type'))
        return value if cast is None else cast(value)

    def _get_config_value(self, key: Key) -> Any:
        for source in reversed(self.sources):
            value = source.get(key)
            if value is not NA:
                return value
        return NA

    def _get_key_schema(self, key: Key) -> Schema:
        schema = self._schema
        for name in key:
            schema = schema.get('items', {}).get(name)
            if schema is None:
                return {}
        return schema


def _flatten(value: Any, path: Key = ()) -> Iterator[Tuple[Key, Any]]:
    if isinstance(value, dict):
        for k, v in value.items():
            k = k if isinstance(k, tuple) else (k,)
            yield from _flatten(v, path + k)
    else:
        yield path, value


def _read_env_file(path: pathlib.Path) -> Iterator[Tuple[str, str]]:
    with path.open() as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue
            name, value = line.split('=', 1)
            yield name.strip(), value.strip()
