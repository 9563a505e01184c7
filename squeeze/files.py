"""Locating configuration files."""

import logging
from pathlib import Path
from typing import Optional

from squeeze.config import ResolverConfig

CONFIG_NAME = "squeeze.yml"


def find_config(start: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest squeeze.yml, searching upwards from start.

    Defaults to starting in the current working directory. Returns None if no
    configuration file is found before reaching the filesystem root.
    """
    path = (start or Path.cwd()).resolve()
    while True:
        config = path / CONFIG_NAME
        if config.exists() and config.is_file():
            logging.info("found configuration %s", config)
            return config
        if path == path.parent:
            logging.debug("no %s found", CONFIG_NAME)
            return None
        path = path.parent


def load_config(path: Optional[Path] = None) -> Optional[ResolverConfig]:
    """Load and validate the configuration at path, or the nearest one.

    Returns None if path is not given and no configuration file is found.
    Logs an error and returns None if path is given but is not a file.
    """
    if path is None:
        path = find_config()
        if path is None:
            return None
    elif not path.is_file():
        logging.error("file %s not found", path)
        return None
    cfg = ResolverConfig.load(path.resolve())
    cfg.validate()
    logging.debug("resolver config: %r", cfg)
    return cfg
