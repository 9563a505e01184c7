"""Assets referenced from stylesheets and scripts."""

from __future__ import annotations

import os
import os.path
import re
from typing import List, Optional, Sequence, Union

SCHEME_PATTERN = re.compile(r"^[a-zA-Z]{3,5}://")

HostSpec = Union[None, str, Sequence[str]]


class ResolveError(ValueError):

    """Base class for errors raised when an asset path cannot be resolved."""


class MissingDocumentRoot(ResolveError):

    """The path needs a document root, but none is set."""


class NoHostsConfigured(ResolveError):

    """The path carries a host, but no hosts are served from the document root."""


class UnmatchedHost(ResolveError):

    """The path carries a host that is not served from the document root."""


def default_base() -> str:
    """Return the default base directory (the current working directory)."""
    return os.getcwd()


def host_with_scheme(host: Optional[str]) -> Optional[str]:
    """Return host with a scheme (http if missing) and no trailing slash."""
    if host is None:
        return None
    if not SCHEME_PATTERN.match(host):
        host = f"http://{host}"
    if host.endswith("/"):
        host = host[:-1]
    return host


def hosts_with_scheme(hosts: HostSpec) -> List[str]:
    """Normalize a single host or a sequence of hosts with host_with_scheme."""
    if hosts is None:
        return []
    if isinstance(hosts, str):
        hosts = [hosts]
    return [h for h in (host_with_scheme(host) for host in hosts) if h is not None]


class Asset:

    """A file referenced by an include path in a CSS or JavaScript file.

    The include path is interpreted in a context made of a base directory, an
    optional document root, and the hosts served from that document root. From
    it the asset derives its filename on disk, its path relative to the base,
    and its absolute path (optionally qualified with a host).

    Example:

        asset = Asset("../images/logo.png", base="/var/www/public/stylesheets")
        asset.filename  # "/var/www/public/images/logo.png"
        asset.rebase("/var/www/public").path  # "images/logo.png"

        asset = Asset("/images/logo.png", document_root="/var/www/public")
        asset.absolute_path(host="cdn.example.com")
        # "http://cdn.example.com/images/logo.png"

    Derived values are computed lazily and cached. An asset never changes its
    context: rebase returns a new asset instead.
    """

    def __init__(
        self,
        path: str,
        base: Optional[str] = None,
        hosts: HostSpec = None,
        document_root: Optional[str] = None,
    ):
        self.include_path = path
        self.base = base if base is not None else default_base()
        self.hosts = hosts_with_scheme(hosts)
        self.document_root = document_root
        self.path_has_host = SCHEME_PATTERN.match(path) is not None
        self.path_is_absolute = self.path_has_host or path.startswith("/")
        self._filename: Optional[str] = None
        self._relative_path: Optional[str] = None
        self._absolute_path: Optional[str] = None

    def __repr__(self) -> str:
        return f"Asset(path={self.include_path!r}, base={self.base!r})"

    @property
    def filename(self) -> str:
        """Return the filename on disk.

        Absolute paths (including paths with a host) require a document root.
        A path with a host can only be resolved if the host is one of hosts.
        """
        if self._filename is not None:
            return self._filename

        if self.path_is_absolute and self.document_root is None:
            raise MissingDocumentRoot(f"no document root set for {self.include_path}")
        if self.path_has_host and not self.hosts:
            raise NoHostsConfigured(
                f"no hosts served from document root for {self.include_path}"
            )

        path = self._strip_host(self.include_path)
        if SCHEME_PATTERN.match(path):
            raise UnmatchedHost(f"no matching host found for {self.include_path}")

        directory = self.document_root if self.path_is_absolute else self.base
        assert directory is not None
        # Unlike os.path.join, the path is always appended to the directory.
        joined = os.path.join(os.path.expanduser(directory), path.lstrip("/"))
        self._filename = os.path.abspath(joined)
        return self._filename

    @property
    def relative_path(self) -> str:
        """Return the path relative to base."""
        if self._relative_path is None:
            base = os.path.expanduser(self.base)
            self._relative_path = os.path.relpath(self.filename, base)
        return self._relative_path

    path = relative_path

    def absolute_path(self, host: Optional[str] = None) -> str:
        """Return the path relative to the document root, starting with "/".

        If host is given, returns a fully qualified URL on that host instead.
        Raises MissingDocumentRoot if no document root is set.
        """
        if self._absolute_path is None:
            if self.document_root is None:
                raise MissingDocumentRoot(
                    f"no document root set for {self.include_path}"
                )
            root = os.path.abspath(os.path.expanduser(self.document_root))
            filename = self.filename
            if filename == root or filename.startswith(os.path.join(root, "")):
                filename = filename[len(root) :]
            self._absolute_path = "/" + filename.lstrip("/")
        if host is None:
            return self._absolute_path
        return f"{host_with_scheme(host)}{self._absolute_path}"

    def rebase(self, base: str) -> Asset:
        """Return a new asset for the same file, relative to base."""
        path = os.path.relpath(self.filename, os.path.expanduser(base))
        return Asset(
            path, base=base, hosts=self.hosts, document_root=self.document_root
        )

    @property
    def basename(self) -> str:
        """Return the basename of the filename on disk."""
        return os.path.basename(self.filename)

    @property
    def dirname(self) -> str:
        """Return the directory of the filename on disk."""
        return os.path.dirname(self.filename)

    def exists(self) -> bool:
        """Return true if the file exists on disk."""
        return os.path.exists(self.filename)

    def _strip_host(self, path: str) -> str:
        # First matching host wins, not the longest one. A host only matches
        # up to the end of the authority, so "a.com" does not match "a.com.org".
        for host in self.hosts:
            if not path.startswith(host):
                continue
            rest = path[len(host) :]
            if rest == "" or rest.startswith("/"):
                return rest
        return path
