"""Directory inodes that keep their children as a linked list of nodes."""

from __future__ import annotations

import contextlib
from pathlib import Path

from .inode import DEFAULT_PREFIX, INode


def split_components(path: str) -> list[str]:
    """Split ``path`` into ``"/"`` followed by its components.

    Empty pieces between slashes are dropped, but the piece after the last
    slash is always kept, even when it is empty.
    """
    pieces = path.split("/")
    return ["/", *(piece for piece in pieces[:-1] if piece), pieces[-1]]


class INodeDirectory(INode):
    """A directory: metadata plus an ordered list of child nodes."""

    def __init__(
        self,
        path: str = "",
        mtime: int = 0,
        atime: int = 0,
        ctime: int = 0,
        prefix: str = DEFAULT_PREFIX,
        create_on_disk: bool = False,
    ) -> None:
        super().__init__(path, mtime, atime, ctime, prefix)
        self._children: list[INode] = []
        if create_on_disk and path:
            with contextlib.suppress(OSError):
                Path(path).mkdir(mode=0o775)

    def is_directory(self) -> bool:
        return True

    def children(self) -> list[INode]:
        """Return a copy of the list of children."""
        return list(self._children)

    def _find(self, name: str) -> INode | None:
        return next((c for c in self._children if c.name == name), None)

    def add_child(self, node: INode) -> None:
        """Append ``node``; its name must not be taken yet."""
        if self._find(node.name) is not None:
            raise ValueError(f"a child named {node.name!r} already exists")
        node.parent = self
        self._children.append(node)
        self.mtime = node.mtime

    def remove_child(self, node: INode) -> None:
        """Remove ``node``; a child with its name must exist."""
        if self._find(node.name) is None:
            raise LookupError(f"no child named {node.name!r}")
        self._children = [c for c in self._children if c is not node]

    def replace_child(self, new_child: INode) -> None:
        """Put ``new_child`` in place of the child that has the same name."""
        if not self._children:
            raise LookupError("the directory is empty")
        old = self._find(new_child.name)
        if old is None:
            raise LookupError(f"no child named {new_child.name!r}")
        self._children = [new_child if c is old else c for c in self._children]

    def child(self, name: str) -> INode | None:
        """Return the child called ``name``, or None."""
        return self._find(name)

    def _walk(self, components: list[str], index: int) -> list[INode | None]:
        existing: list[INode | None] = [None] * max(len(components), 1)
        current: INode | None = self
        count = 0
        index = min(index, 0)
        while count < len(components) and current is not None:
            if index >= 0:
                existing[index] = current
            if not current.is_directory() or count == len(components) - 1:
                break
            current = current.child(components[count + 1])
            count += 1
            index += 1
        return existing

    def node_at(self, path: str) -> INode | None:
        """Return the node at ``path`` relative to this directory, or None."""
        components = split_components(path)
        return self._walk(components, 1 - len(components))[0]

    def nodes_along(self, path: str) -> list[INode | None]:
        """Return the nodes on ``path``, one per component; None where missing."""
        components = split_components(path)
        return self._walk(components, 0)[: len(components)]

    def add_node(self, path: str, node: INode) -> None:
        """Add ``node`` as a child of the directory found at ``path``."""
        target = self.node_at(path)
        if target is None:
            raise LookupError(f"no such path: {path!r}")
        if not target.is_directory():
            raise NotADirectoryError(path)
        target.add_child(node)

    def next_child(self, name: str) -> INode | None:
        """Return the child after the one called ``name``, or None."""
        if not name:
            return None
        for position, item in enumerate(self._children):
            if item.name == name:
                following = self._children[position + 1 : position + 2]
                return following[0] if following else None
        return None

    def copy(self) -> INodeDirectory:
        clone = super().copy()
        clone._children = list(self._children)
        return clone