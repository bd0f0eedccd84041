import logging
import os
import pathlib

import bipartite_flow._models as models
import bipartite_flow._util as util

from ._errors import InputFormatError, describe

logger = logging.getLogger(__name__)


def config_path():
    config_file = os.environ.get("BIPARTITE_FLOW_CONFIG")
    if config_file:
        return pathlib.Path(config_file)

    config_home = pathlib.Path(
        os.environ.get("XDG_CONFIG_HOME", pathlib.Path.home() / ".config")
    )
    return config_home / "bipartite-flow" / "config.toml"


def load_config(config_file=None):
    """Load the config file.

    Without an explicit `config_file` the default location is used, and a
    missing file there means defaults. An explicit file has to exist.
    """
    if config_file is None:
        config_file = config_path()
        if not config_file.is_file():
            logger.debug('Config file "%s" not found, using defaults', config_file)
            return models.Config()
    config_file = pathlib.Path(config_file)

    try:
        text = config_file.read_text(encoding="utf-8")
    except OSError as e:
        message = f'Error opening config file "{config_file}": {e.strerror}'
        raise InputFormatError(message) from e
    except UnicodeDecodeError as e:
        message = f'Error reading config file "{config_file}": {e.reason}'
        raise InputFormatError(message) from e

    try:
        content = util.toml_loads(text)
        return models.Config.init_recursive(**content)
    except (TypeError, ValueError) as e:
        message = f'Invalid config file "{config_file}": {describe(e)}'
        raise InputFormatError(message) from e
