"""Named-data names and the basic inode record shared by files and directories."""

from __future__ import annotations

import copy as _copy
from urllib.parse import unquote_to_bytes

DEFAULT_PREFIX = "/ndn/fsndn/prefix"

_UNESCAPED = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+-._"
)


def _escape(component: bytes) -> str:
    if set(component) <= {ord(".")}:
        # Components made only of periods get three extra periods.
        return "..." + component.decode("ascii")
    return "".join(
        chr(byte) if byte in _UNESCAPED else f"%{byte:02X}" for byte in component
    )


def _unescape(piece: str) -> bytes | None:
    piece = piece.strip()
    if set(piece) <= {"."}:
        if len(piece) < 3:
            return None
        return piece[3:].encode("ascii")
    return unquote_to_bytes(piece)


class NdnName:
    """A hierarchical name made of binary components, parsed from a URI."""

    def __init__(self, uri: str = "") -> None:
        uri = uri.strip()
        if uri.startswith("ndn:"):
            uri = uri[4:]
        if uri.startswith("//"):
            slash = uri.find("/", 2)
            uri = "" if slash == -1 else uri[slash:]
        components = (_unescape(piece) for piece in uri.split("/"))
        self._components: tuple[bytes, ...] = tuple(
            c for c in components if c is not None
        )

    @classmethod
    def _from_components(cls, components) -> NdnName:
        name = cls()
        name._components = tuple(components)
        return name

    @property
    def components(self) -> tuple[bytes, ...]:
        return self._components

    def to_uri(self) -> str:
        """Return the escaped URI form, "/" for the empty name."""
        if not self._components:
            return "/"
        return "".join("/" + _escape(c) for c in self._components)

    def sub_name(self, start: int) -> NdnName:
        """Return the components from ``start`` on; negative counts from the end."""
        if start < 0:
            start = max(len(self._components) + start, 0)
        return self._from_components(self._components[start:])

    def is_prefix_of(self, other: NdnName) -> bool:
        n = len(self._components)
        return n <= len(other._components) and other._components[:n] == self._components

    def __len__(self) -> int:
        return len(self._components)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NdnName):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def __str__(self) -> str:
        return self.to_uri()

    def __repr__(self) -> str:
        return f"NdnName({self.to_uri()!r})"


class INode:
    """Metadata common to every node: its path, named-data name and times."""

    def __init__(
        self,
        path: str = "",
        mtime: int = 0,
        atime: int = 0,
        ctime: int = 0,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        self.path = path
        self.prefix = prefix
        self.ndn_name = NdnName(prefix + path)
        self.name = self.ndn_name.sub_name(-1).to_uri()[1:]
        self.mtime = mtime
        self.atime = atime
        self.ctime = ctime
        self.user_id = 0
        self.group_id = 0
        self.is_root = path == "/"
        self.parent: INode | None = None

    def ndn_path(self) -> str:
        """The named-data name with the global prefix removed, as a URI."""
        return self.ndn_name.sub_name(len(NdnName(self.prefix))).to_uri()

    def is_directory(self) -> bool:
        return False

    def copy(self) -> INode:
        """Return a detached copy carrying the same names, times and owners."""
        clone = _copy.copy(self)
        clone.parent = None
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"