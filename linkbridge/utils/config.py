"""Utility functions for application configuration management.

Configuration is resolved from three layers, highest precedence first:

    1. environment variables (`LINKBRIDGE_OUTPUT_DIR`, `LINKBRIDGE_REGISTRY_FILE`)
    2. an optional YAML file named by `LINKBRIDGE_CONFIG_FILE`
    3. built-in defaults (output directory 's', registry file 'registry.json')

The YAML file is a flat mapping:

    output_dir: public/s
    registry_file: registry.json

Functions:
    config_file() -> Path | None
        Return the configuration file path from `LINKBRIDGE_CONFIG_FILE`, if set.

    read_config_file(path) -> dict
        Parse and validate a YAML configuration file.

    load_config() -> LinkBridgeConfig
        Resolve the effective configuration.

Example:
    >>> os.environ['LINKBRIDGE_OUTPUT_DIR'] = 'redirects'
    >>> load_config().output_dir
    PosixPath('redirects')
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from linkbridge.exceptions import BadConfigurationError
from linkbridge.utils.constants import (
    CONFIG_FILE_ENV,
    OUTPUT_DIR_ENV,
    REGISTRY_FILE_ENV,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_REGISTRY_FILE,
)


logger = logging.getLogger(__name__)

CONFIG_KEYS = frozenset({'output_dir', 'registry_file'})


@dataclass(frozen=True)
class LinkBridgeConfig:
    """Effective linkbridge configuration.

    Attributes:
        output_dir (Path):
            Directory redirect pages are written to.
        registry_file (str):
            File name of the JSON registry, stored inside the output directory.
    """
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    registry_file: str = DEFAULT_REGISTRY_FILE


def config_file() -> Path | None:
    """Return the configuration file path set via 'LINKBRIDGE_CONFIG_FILE'

    Returns:
        Path | None: configured path, None if the variable is unset or empty.
    """
    value = os.environ.get(CONFIG_FILE_ENV)
    return Path(value) if value else None


def read_config_file(path: Path) -> dict[str, str]:
    """Read and validate a YAML configuration file

    Args:
        path (Path): YAML file to read

    Returns:
        dict[str, str]: configuration values found in the file.

    Raises:
        BadConfigurationError:
            If the file can't be read, is not valid YAML, is not a mapping,
            or holds unknown keys or non-string values.
    """
    try:
        with open(path, encoding='utf-8') as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise BadConfigurationError(f"Can't read configuration file '{path}'.") from e
    except yaml.YAMLError as e:
        raise BadConfigurationError(f"Configuration file '{path}' is not valid YAML.") from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise BadConfigurationError(f"Configuration file '{path}' must contain a mapping.")

    unknown = sorted(str(key) for key in document if key not in CONFIG_KEYS)
    if unknown:
        unknown_list = ', '.join(f"'{key}'" for key in unknown)
        raise BadConfigurationError(f"Unknown keys in configuration file '{path}': {unknown_list}")

    for key, value in document.items():
        if not isinstance(value, str) or not value:
            raise BadConfigurationError(f"Configuration key '{key}' must be a non-empty string (file '{path}').")

    logger.debug('Loaded configuration file.', extra={'configFile': str(path), 'keys': sorted(document)})
    return document


def load_config() -> LinkBridgeConfig:
    """Resolve the effective configuration

    Returns:
        LinkBridgeConfig: defaults overridden by the file, then by the environment.

    Raises:
        BadConfigurationError:
            If a configuration file is set but missing or invalid, or the
            registry file name holds a path separator.
    """
    values = {}

    path = config_file()
    if path is not None:
        values.update(read_config_file(path))

    for key, env in (('output_dir', OUTPUT_DIR_ENV), ('registry_file', REGISTRY_FILE_ENV)):
        if os.environ.get(env):
            values[key] = os.environ[env]

    registry_file = values.get('registry_file', DEFAULT_REGISTRY_FILE)
    if Path(registry_file).name != registry_file:
        raise BadConfigurationError(f"Registry file must be a plain file name (given value: '{registry_file}').")

    return LinkBridgeConfig(
        output_dir=Path(values.get('output_dir', DEFAULT_OUTPUT_DIR)),
        registry_file=registry_file,
    )
