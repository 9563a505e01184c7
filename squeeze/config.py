"""Configuration file parser."""

import logging
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, TextIO

import yaml


class ResolverConfig:

    """YAML configuration for resolving asset paths, usually from squeeze.yml.

    Example usage:

        cfg = ResolverConfig.load(Path("/path/to/squeeze.yml"))
        cfg.validate()

    Note that the creator must call validate(). Relative directories are
    interpreted relative to the directory containing the configuration file.
    A missing base stays None, so that the resolver falls back to the current
    working directory.
    """

    defaults: Dict[str, Any] = {
        "base": None,
        "document_root": None,
        "hosts": [],
    }

    def __init__(self, path: Path, data: Mapping[str, Any]):
        self.path = path
        self.data = dict(data)

    def __repr__(self) -> str:
        return f"ResolverConfig(path={self.path!r}, data={self.data!r})"

    @classmethod
    def load(cls, path: Path) -> "ResolverConfig":
        """Load configuration from a file."""
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls, path: Path, content: str) -> "ResolverConfig":
        """Load configuration from a string."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls, path: Path, content: TextIO) -> "ResolverConfig":
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        """Get a configuration value."""
        return self.data[key]

    def validate(self):
        """Validate the loaded configuration and fill in defaults.

        This must be called manually after creating an instance.
        """
        for key in self.data:
            if key not in self.defaults:
                logging.warning("%s: unknown key %r", self.path, key)
        self.data = {**self.defaults, **self.data}
        root = self.path.parent
        for key in ("base", "document_root"):
            val = self.data[key]
            if val is None:
                continue
            if not isinstance(val, str):
                logging.error("%s: %r must be a string", self.path, key)
                self.data[key] = None
                continue
            self.data[key] = str(root / Path(val).expanduser())
        hosts = self.data["hosts"]
        if hosts is None:
            self.data["hosts"] = []
        elif isinstance(hosts, str):
            self.data["hosts"] = [hosts]
        elif not isinstance(hosts, list) or not all(
            isinstance(h, str) for h in hosts
        ):
            logging.error("%s: 'hosts' must be a string or list of strings", self.path)
            self.data["hosts"] = []
