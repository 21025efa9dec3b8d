"""A file inode whose contents are stored as segments in file blocks."""

from __future__ import annotations

from .fileblock import BlockStore, FileBlock, default_store
from .inode import DEFAULT_PREFIX, INode


class INodeFile(INode):
    """A regular file: metadata plus the blocks holding its segments."""

    def __init__(
        self,
        path: str = "",
        mtime: int = 0,
        atime: int = 0,
        ctime: int = 0,
        store: BlockStore | None = None,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        super().__init__(path, mtime, atime, ctime, prefix)
        self.is_root = False
        self.store = store if store is not None else default_store()
        self.size = 0
        self.blocks: list[FileBlock] = []

    def write(self, content: bytes) -> None:
        """Store ``content``, split into segments of the store's segment size."""
        content = bytes(content)
        self.size = len(content)
        seg_size = self.store.seg_size
        name = self.ndn_path()
        if len(content) <= seg_size:
            self.blocks.append(FileBlock(name, content, 0, self.store))
            return
        for seg, start in enumerate(range(0, len(content), seg_size)):
            chunk = content[start:start + seg_size]
            self.blocks.append(FileBlock(name, chunk, seg, self.store))

    def read(self) -> bytes:
        """Assemble the file's contents from its blocks."""
        seg_size = self.store.seg_size
        buffer = bytearray(self.size)
        for block in self.blocks:
            data = block.read(block.size)
            start = block.seg * seg_size
            end = start + len(data)
            if end > len(buffer):
                buffer.extend(bytes(end - len(buffer)))
            buffer[start:end] = data
        return bytes(buffer)

    def insert_seg(self, content: bytes, seg: int) -> None:
        """Store one segment; it may not exceed the segment size."""
        content = bytes(content)
        if len(content) > self.store.seg_size:
            raise ValueError("segment content is bigger than the segment size")
        self.size += len(content)
        self.blocks.append(FileBlock(self.ndn_path(), content, seg, self.store))

    def read_seg(self, size: int, seg: int) -> bytes:
        """Read ``size`` bytes of segment ``seg``, located by its position."""
        if size > self.store.seg_size:
            raise ValueError("requested size is bigger than the segment size")
        if not self.blocks:
            raise LookupError(f"{self.path!r} holds no segments")
        return self.blocks[seg % len(self.blocks)].read(size)

    def remove(self) -> None:
        """Forget the file's blocks and reset its size."""
        self.blocks.clear()
        self.size = 0

    def copy(self) -> INodeFile:
        clone = super().copy()
        clone.blocks = list(self.blocks)
        return clone