"""Factory for assets sharing a common context."""

from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING, List, Optional

from squeeze.asset import Asset, HostSpec, default_base, hosts_with_scheme

if TYPE_CHECKING:
    from squeeze.config import ResolverConfig


class PathResolver:

    """Creates Asset objects from a common set of options.

    Also cycles through the asset hosts, independently of any single asset. This
    way many assets can be resolved first and assigned hosts afterwards:

        resolver = PathResolver(
            document_root="/var/www",
            hosts=["assets1.mysite.com", "assets2.mysite.com"],
        )
        asset = resolver.resolve("/images/logo.png")
        asset.absolute_path(resolver.cycle_hosts())
        # "http://assets1.mysite.com/images/logo.png"
        asset = resolver.resolve("/favicon.ico")
        asset.absolute_path(resolver.cycle_hosts())
        # "http://assets2.mysite.com/favicon.ico"
    """

    def __init__(
        self,
        base: Optional[str] = None,
        document_root: Optional[str] = None,
        hosts: HostSpec = None,
    ):
        self._base = base if base is not None else default_base()
        self.document_root = document_root
        self.hosts: List[str] = hosts_with_scheme(hosts)
        self._current_host = 0
        self._lock = Lock()

    def __repr__(self) -> str:
        return (
            f"PathResolver(base={self._base!r}, "
            f"document_root={self.document_root!r}, hosts={self.hosts!r})"
        )

    @staticmethod
    def from_config(
        cfg: Optional[ResolverConfig],
        base: Optional[str] = None,
        document_root: Optional[str] = None,
        hosts: HostSpec = None,
    ) -> PathResolver:
        """Create a resolver from a validated configuration.

        Arguments that are not None override the configured values. Without a
        configuration, only the arguments are used. If neither sets a base, it
        defaults to the current working directory.
        """
        if cfg is not None:
            base = base if base is not None else cfg["base"]
            if document_root is None:
                document_root = cfg["document_root"]
            hosts = hosts if hosts is not None else cfg["hosts"]
        return PathResolver(base=base, document_root=document_root, hosts=hosts)

    @property
    def base(self) -> str:
        """Base directory for assets resolved from now on.

        Setting it does not affect assets that were already resolved.
        """
        return self._base

    @base.setter
    def base(self, base: str):
        self._base = base

    def resolve(self, path: str) -> Asset:
        """Return an asset for path, using the options set on the resolver."""
        return Asset(
            path, base=self._base, hosts=self.hosts, document_root=self.document_root
        )

    def cycle_hosts(self) -> Optional[str]:
        """Return the next asset host, or None if there are no hosts."""
        if not self.hosts:
            return None
        with self._lock:
            index = self._current_host % len(self.hosts)
            host = self.hosts[index]
            self._current_host = (index + 1) % len(self.hosts)
        return host

    host = cycle_hosts
