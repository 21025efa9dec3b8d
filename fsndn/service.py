"""Request handling for a data node, reporting failures as cancellations."""

from __future__ import annotations

from dataclasses import dataclass

from .datanode import DataNode, NoSuchFileError
from .fileblock import BlockStore

NO_SUCH_FILE = "No Such File"


class ServiceCancelled(Exception):
    """Raised when the data node refuses or cannot complete a request."""

    def __init__(self, message: str, result: int = -1) -> None:
        super().__init__(message)
        self.result = result


@dataclass(frozen=True)
class AddNewFileRequest:
    """Create a file with content; ``size`` must match the content length."""

    name: str
    content: bytes
    size: int
    mtime: int = 0
    atime: int = 0
    ctime: int = 0


@dataclass(frozen=True)
class WriteRequest:
    """Write content to an existing file; ``size`` must match the content."""

    name: str
    content: bytes
    size: int


@dataclass(frozen=True)
class AddFileSegRequest:
    """Store one segment of a file; ``size`` must match the content."""

    name: str
    content: bytes
    size: int
    seg: int


def _check_size(name: str, content: bytes, size: int, action: str) -> None:
    if size != len(content):
        raise ServiceCancelled(
            f"{action} {name!r} failed: received {len(content)} bytes, expected {size}"
        )


class DataNodeService:
    """The operations a data node offers to clients."""

    def __init__(self, node_size: int, store: BlockStore | None = None) -> None:
        self.datanode = DataNode(node_size, store)

    def get_file_size(self, name: str) -> int:
        """Size of the named file, or -1 when the node does not hold it."""
        try:
            return self.datanode.file_size(name)
        except NoSuchFileError:
            return -1

    def add_empty_file(self, name: str, mtime: int, atime: int, ctime: int) -> int:
        self.datanode.add_empty_file(name, mtime, atime, ctime)
        return 0

    def add_new_file(self, request: AddNewFileRequest) -> int:
        _check_size(request.name, request.content, request.size, "add new file")
        self.datanode.add_new_file(
            request.name, request.content, request.mtime, request.atime, request.ctime
        )
        return 0

    def del_file(self, name: str) -> int:
        try:
            self.datanode.del_file(name)
        except NoSuchFileError:
            raise ServiceCancelled(f"no file named {name!r}") from None
        return 0

    def del_dir(self, prefix: str) -> int:
        try:
            self.datanode.del_dir(prefix)
        except NoSuchFileError:
            raise ServiceCancelled(f"no directory named {prefix!r}") from None
        return 0

    def write_to_file(self, request: WriteRequest) -> int:
        _check_size(request.name, request.content, request.size, "write to")
        try:
            self.datanode.write_to_file(request.name, request.content)
        except NoSuchFileError:
            raise ServiceCancelled(f"no file named {request.name!r}") from None
        return 0

    def read_from_file(self, name: str, size: int) -> bytes:
        try:
            return self.datanode.read_from_file(name, size)
        except NoSuchFileError:
            raise ServiceCancelled(NO_SUCH_FILE) from None

    def add_file_seg(self, request: AddFileSegRequest) -> int:
        _check_size(request.name, request.content, request.size, "write seg to")
        try:
            self.datanode.add_file_seg(request.name, request.content, request.seg)
        except ValueError as exc:
            raise ServiceCancelled(str(exc)) from None
        return 0

    def get_file_seg(self, name: str, size: int, seg: int) -> bytes:
        try:
            return self.datanode.get_file_seg(name, size, seg)
        except NoSuchFileError:
            raise ServiceCancelled(NO_SUCH_FILE) from None
        except (ValueError, LookupError) as exc:
            raise ServiceCancelled(str(exc)) from None

    def get_children(self, prefix: str) -> list[str]:
        return list(self.datanode.show_children(prefix))

    def get_all_children(self) -> list[str]:
        return list(self.datanode.show_all_children())

    def get_space_size(self) -> int:
        return self.datanode.space_size()