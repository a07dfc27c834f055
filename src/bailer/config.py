# -*- coding: ascii -*-
"""
Configuration loading.

A YAML file is deep-merged over DEFAULT_CONFIG:

    engine:
      dedup: true
      enantiomers: true
    output:
      outdir: "."
      session_file: true
      table: null
    logging:
      level: INFO
"""

import copy
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml

from .errors import ConfigError

LOG = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'engine': {
        'dedup': True,
        'enantiomers': True,
    },
    'output': {
        'outdir': '.',
        'session_file': True,
        'table': None,
    },
    'logging': {
        'level': 'INFO',
    },
}

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def deep_merge(defaults: Dict[str, Any], user_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge user configuration with defaults, preserving user values.

    Args:
        defaults: Default configuration dictionary
        user_config: User configuration dictionary

    Returns:
        Merged configuration with user values taking precedence
    """
    result = copy.deepcopy(defaults)

    def _merge_recursive(d, u):
        for k, v in u.items():
            if isinstance(v, dict) and isinstance(d.get(k), dict):
                _merge_recursive(d[k], v)
            else:
                d[k] = v

    _merge_recursive(result, user_config)
    return result


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file merged over the defaults.

    With no path the defaults are returned.

    Raises:
        ConfigError: if the file is missing, unreadable or not a mapping
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config {config_path}: {e}") from e

    if data is None:
        LOG.warning(f"Config file {config_path} is empty, using defaults")
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must contain a mapping, got {type(data).__name__}")

    config = deep_merge(DEFAULT_CONFIG, data)
    validate_config(config)
    LOG.debug(f"Loaded config from {config_path}: {config}")
    return config


def validate_config(config: Dict[str, Any]) -> None:
    for section in ('engine', 'output', 'logging'):
        if not isinstance(config.get(section), dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")

    level = str(config['logging'].get('level', 'INFO')).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unsupported logging level: {level}")
    config['logging']['level'] = level

    table = config['output'].get('table')
    if table is not None and not str(table).endswith(('.csv', '.parquet')):
        raise ConfigError(f"Unsupported table format: {table}")
