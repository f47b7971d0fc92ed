import json
import logging
import os
from typing import Any, Dict

from serde import Model, fields

from .exceptions import ConfigurationError
from .logger import get_logger

logger = get_logger('config')

config_defaults = {'db_name': 'tomodex',
                   'log_level': 'INFO',
                   'mongo_timeout_ms': 10000}

__all__ = ['Config', 'get_config', 'config_defaults']


# The normalizers are pointed out explicitly here for robustness in case the field
# is written in the config file as a string, or is just fetched from the environment.
class Config(Model):
    # misc
    log_level: fields.Str()
    tomo_dex_path: fields.Optional(fields.Str)  # truffle build artifacts, informational only

    # db stuff
    mongo_url: fields.Optional(fields.Str)  # not needed for dry runs
    db_name: fields.Str()
    mongo_timeout_ms: fields.Int(normalizers=[int])

    # chain stuff
    network: fields.Str()


def _load_config_file(config_file: str) -> Dict[str, Any]:
    logger.info(f'Loading custom configuration: {config_file}')
    try:
        with open(config_file) as f:
            return json.load(f)
    except IOError as e:
        logger.critical("there was a problem opening the config file")
        raise ConfigurationError(f'Cannot read config file {config_file!r}: {e}') from e
    except json.JSONDecodeError as e:
        logger.critical("config file isn't valid json")
        raise ConfigurationError(f'Config file {config_file!r} is not valid json') from e


def get_config(config_file: str = None, **overrides) -> Config:
    """
    Resolves every Config field, first match wins:
    explicit overrides (cli arguments), environment, config file, defaults

    :param config_file: optional json file, falls back to $SEED_CONFIG
    :param overrides: field values, None values are ignored
    """
    config_file = config_file or os.getenv('SEED_CONFIG')
    conf_file_data = _load_config_file(config_file) if config_file else {}
    overrides = {k: v for k, v in overrides.items() if v is not None}

    config_data = {}
    for field_name, field_type in Config.__fields__.items():  # pylint: disable=no-member
        for source in [overrides, os.environ, conf_file_data, config_defaults]:
            if field_name in source:
                config_data[field_name] = source[field_name]
                break

            upper_field_name = field_name.upper()
            if upper_field_name in source:
                config_data[field_name] = source[upper_field_name]
                break
        else:  # This will run if the field has not been found in the `for` loop (if `break` has not been executed)
            if not isinstance(field_type, fields.Optional):
                raise ConfigurationError(f'Missing key {field_name!r} in arguments, configuration file '
                                         f'or environment variables')

    try:
        config = Config.from_dict(config_data)
    except Exception as e:
        raise ConfigurationError(f'Invalid configuration: {e}') from e

    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ConfigurationError(f'Invalid log level: {config.log_level!r}')
    return config
