"""A data node: a flat table of named files stored in file blocks."""

from __future__ import annotations

import time

from .fileblock import BlockStore, default_store
from .inode import DEFAULT_PREFIX, NdnName
from .inodefile import INodeFile


class NoSuchFileError(LookupError):
    """Raised when a named file is not held by the data node."""


def _now() -> int:
    return int(time.time())


class DataNode:
    """Holds files by name and tracks how much of its capacity is used."""

    def __init__(self, node_size: int, store: BlockStore | None = None) -> None:
        self.store = store if store is not None else default_store()
        self._node_size = node_size
        self.used_size = 0
        now = _now()
        self._names: dict[str, INodeFile] = {
            "": INodeFile("", now, now, now, self.store)
        }

    def _file(self, name: str) -> INodeFile:
        try:
            return self._names[name]
        except KeyError:
            raise NoSuchFileError(name) from None

    def _new_file(self, name: str, mtime: int, atime: int, ctime: int) -> INodeFile:
        return INodeFile(name, mtime, atime, ctime, self.store)

    def add_empty_file(self, name: str, mtime: int, atime: int, ctime: int) -> int:
        """Create an empty file unless one exists; return the last index."""
        self._names.setdefault(name, self._new_file(name, mtime, atime, ctime))
        return len(self._names) - 1

    def add_new_file(
        self, name: str, content: bytes, mtime: int, atime: int, ctime: int
    ) -> int:
        """Create a file holding ``content``; return the last index."""
        content = bytes(content)
        new_file = self._new_file(name, mtime, atime, ctime)
        new_file.write(content)
        self._names.setdefault(name, new_file)
        self.used_size += len(content)
        return len(self._names) - 1

    def del_file(self, name: str) -> None:
        """Delete a file and give its space back."""
        inode_file = self._file(name)
        self.used_size -= inode_file.size
        inode_file.remove()
        del self._names[name]

    def del_dir(self, prefix: str) -> int:
        """Delete every file under the directory ``prefix``; return how many."""
        base = prefix.rstrip("/")
        doomed = [
            name
            for name in self._names
            if name and (name == base or name.startswith(base + "/"))
        ]
        if not doomed:
            raise NoSuchFileError(prefix)
        for name in doomed:
            self.del_file(name)
        return len(doomed)

    def file_size(self, name: str) -> int:
        return self._file(name).size

    def write_to_file(self, name: str, content: bytes) -> None:
        content = bytes(content)
        self._file(name).write(content)
        self.used_size += len(content)

    def read_from_file(self, name: str, size: int) -> bytes:
        """Read the first ``size`` bytes of a file, zero-padded."""
        data = self._file(name).read()
        return data[:size].ljust(size, b"\0")

    def add_file_seg(self, name: str, content: bytes, seg: int) -> None:
        """Store segment ``seg`` of a file, creating the file if needed."""
        content = bytes(content)
        if name not in self._names:
            now = _now()
            self.add_empty_file(name, now, now, now)
        self._names[name].insert_seg(content, seg)
        self.used_size += len(content)

    def get_file_seg(self, name: str, size: int, seg: int) -> bytes:
        return self._file(name).read_seg(size, seg)

    def show_children(self, prefix: str) -> list[str]:
        """Names of the entries directly below ``prefix``."""
        prefix_name = NdnName(DEFAULT_PREFIX + prefix)
        found: dict[str, None] = {}
        for inode_file in self._names.values():
            if prefix_name.is_prefix_of(inode_file.ndn_name):
                rest = inode_file.ndn_name.sub_name(len(prefix_name))
                if len(rest):
                    found[rest.components[0].decode("utf-8", "replace")] = None
        return list(found)

    def show_all_children(self) -> list[str]:
        """Full named-data URIs of every stored entry."""
        return [f.ndn_name.to_uri() for f in self._names.values()]

    def node_size(self) -> int:
        return self._node_size

    def space_size(self) -> int:
        return self._node_size - self.used_size