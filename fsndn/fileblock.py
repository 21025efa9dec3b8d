"""On-disk storage of file segments, packing small blocks into shared files."""

from __future__ import annotations

import functools
import threading
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SEG_SIZE = 1048576
DEFAULT_ROOT = "/tmp/fsndn"


@dataclass
class SpaceEntry:
    """A storage file that still has room after ``offset``."""

    path: str
    offset: int
    seg_size: int

    @property
    def space(self) -> int:
        return self.seg_size - self.offset


class SpaceTable:
    """Storage files with free room, kept ordered by free space after updates."""

    def __init__(self, seg_size: int = DEFAULT_SEG_SIZE) -> None:
        self.seg_size = seg_size
        self._entries: list[SpaceEntry] = []

    def find(self, size: int) -> SpaceEntry | None:
        """Return the first entry with at least ``size`` bytes free."""
        return next((e for e in self._entries if e.space >= size), None)

    def add(self, path: str, offset: int) -> SpaceEntry:
        entry = SpaceEntry(str(path), offset, self.seg_size)
        self._entries.append(entry)
        return entry

    def update(self, path: str, size: int) -> None:
        """Account for ``size`` bytes written into ``path``; drop it when full."""
        path = str(path)
        for entry in self._entries:
            if entry.path == path:
                entry.offset += size + 1
                if entry.space <= 0:
                    self._entries.remove(entry)
                break
        self._entries.sort(key=lambda e: e.space)

    def __iter__(self):
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


class BlockStore:
    """A directory of storage files together with its free-space table."""

    def __init__(self, root: str | Path = DEFAULT_ROOT, seg_size: int = DEFAULT_SEG_SIZE) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self.seg_size = seg_size
        self.space_table = SpaceTable(seg_size)
        self._lock = threading.RLock()

    def _path_for(self, name: str, seg: int) -> Path:
        flat = name.strip("/").replace("/", "_")
        return self.root / f"{flat}_seg{seg}.fsndn"


@functools.lru_cache(maxsize=None)
def default_store() -> BlockStore:
    """The process-wide store used when none is given."""
    return BlockStore()


class FileBlock:
    """One stored segment of a file: where it lives and how long it is."""

    def __init__(self, name: str, data: bytes, seg: int, store: BlockStore | None = None) -> None:
        self.name = name
        self.seg = seg
        self.store = store if store is not None else default_store()
        self.size = len(data)
        self.offset = 0
        self.path: Path | None = None
        self.write(data)

    def write(self, content: bytes) -> None:
        """Store ``content``, reusing free room in a shared file when it fits."""
        content = bytes(content)
        size = len(content)
        store = self.store
        with store._lock:
            entry = store.space_table.find(size) if size < store.seg_size else None
            if entry is None:
                self.path = store._path_for(self.name, self.seg)
                offset = 0
                self.path.write_bytes(b"")
                if size < store.seg_size:
                    store.space_table.add(str(self.path), size + 1)
            else:
                self.path = Path(entry.path)
                offset = entry.offset
                store.space_table.update(entry.path, size)
            with open(self.path, "r+b") as fout:
                fout.seek(offset)
                fout.write(content)
            self.offset = offset

    def read(self, size: int) -> bytes:
        """Read ``size`` bytes from the block's position, zero-padded past the end."""
        with open(self.path, "rb") as fin:
            fin.seek(self.offset)
            data = fin.read(size)
        return data.ljust(size, b"\0")

    def __lt__(self, other: FileBlock) -> bool:
        return self.seg < other.seg

    def __repr__(self) -> str:
        return f"FileBlock({self.name!r}, seg={self.seg}, size={self.size})"