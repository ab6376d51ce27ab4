import re
from dataclasses import dataclass
from pathlib import Path

import yaml

from namestamp.config import ENCODING
from namestamp.errors import ParseError, ReadWriteError, ShapeError
from namestamp.obs import logger

KEY_NAME = 'name'
PATTERN_SUFFIX = re.compile(r'\sv[0-9]+\.[0-9]+\.[0-9]+\Z')


@dataclass
class Result:
    """

    Outcome of a successful stamp.

    """
    path: Path
    name_old: str
    name_new: str

    def __str__(self):
        return f'Updated {self.path} name → {self.name_new}'


def strip_version(name: str) -> str:
    """

    Remove a trailing ` vX.Y.Z` from the name, if there is one. Anything else, including pre-release tags like
    `v1.2.3-beta`, is left as-is.

    """
    return PATTERN_SUFFIX.sub('', name, count=1)


def stamp_name(name, version: str) -> str:
    if not isinstance(name, str):
        msg = f'Field "{KEY_NAME}" must be a string, got {type(name).__name__}: {name!r}'
        raise ShapeError(msg)

    return f'{strip_version(name)} v{version}'


def load(path: Path, encoding: str = ENCODING) -> dict:
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeError) as exception:
        msg = f'Could not read "{path}": {exception}'
        raise ReadWriteError(msg, path=path) from exception

    try:
        config = yaml.safe_load(text)
    except yaml.YAMLError as exception:
        msg = f'Could not parse "{path}" as YAML: {exception}'
        raise ParseError(msg, path=path) from exception

    if not isinstance(config, dict):
        msg = f'Expected a mapping at the root of "{path}", got {type(config).__name__}'
        raise ParseError(msg, path=path)

    return config


def dump(config: dict) -> str:
    try:
        return yaml.dump(config, sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as exception:
        msg = f'Could not serialize config to YAML: {exception}'
        raise ParseError(msg) from exception


def stamp(path, version: str, encoding: str = ENCODING) -> Result:
    """

    Read the YAML file at `path`, replace any old version suffix on its `name` with `version`, and write it back in
    place. Nothing is written unless reading, parsing and serializing all succeed.

    """
    path = Path(path)
    config = load(path, encoding=encoding)
    logger.debug(f'Loaded {len(config)} top-level keys from "{path}"')

    if KEY_NAME not in config:
        msg = f'No "{KEY_NAME}" field found in "{path}"'
        raise ShapeError(msg, path=path)

    name_old = config[KEY_NAME]
    try:
        name_new = stamp_name(name_old, version)
    except ShapeError as exception:
        exception.path = path
        raise

    config[KEY_NAME] = name_new
    text = dump(config)

    try:
        path.write_text(text, encoding=encoding)
    except (OSError, UnicodeError) as exception:
        msg = f'Could not write "{path}": {exception}'
        raise ReadWriteError(msg, path=path) from exception

    logger.debug(f'Stamped "{name_old}" as "{name_new}" with version {version}')
    return Result(path=path, name_old=name_old, name_new=name_new)
