# fsndn

A small storage layer that keeps files under hierarchical *named data*
names. Files are split into fixed-size segments, segments are written to
block files on disk (small segments share a block file through a
free-space table), and a data node keeps track of what it stores and how
much of its capacity is left.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `fsndn.inode`: `NdnName` is a name made of binary components, parsed
  from a slash-separated URI (`to_uri`, `sub_name`, `is_prefix_of`,
  `len()`). `INode` holds the metadata shared by files and directories:
  `path`, `name`, `ndn_name`, the three times, `ndn_path()` (the name with
  the global prefix `/ndn/fsndn/prefix` removed) and `copy()`.
- `fsndn.fileblock`: `BlockStore` is a root directory (default
  `/tmp/fsndn`, created if missing), a segment size (default 1048576
  bytes) and a `SpaceTable` of block files that still have room.
  `FileBlock` is one stored segment. A segment smaller than the segment
  size goes into the first block file with enough free room, or else into
  a new block file that is then entered in the table. `read(size)` pads
  with zero bytes past the end of the data.
- `fsndn.inodefile`: `INodeFile` is a file made of blocks. `write` splits
  content into segments, `read` puts it back together, `insert_seg` adds
  one segment and `read_seg` reads one; both of the latter raise
  `ValueError` when the size exceeds the segment size. `remove` drops
  the blocks and resets the size.
- `fsndn.inodedirectory`: `INodeDirectory` is a directory with an ordered
  list of children: `add_child`, `remove_child`, `replace_child`, `child`,
  `next_child`, and path lookup with `node_at`, `nodes_along` and
  `add_node`. `split_components` splits a path into `"/"` followed by its
  parts.
- `fsndn.datanode`: `DataNode` is a flat table of files by name with
  usage accounting (`node_size()`, `space_size()`). It can add, write,
  read and delete files, store and fetch segments (`add_file_seg` creates
  the file if needed), delete every file under a directory prefix
  (`del_dir`) and list entries (`show_children`, `show_all_children`).
  A missing file raises `NoSuchFileError`.
- `fsndn.service`: `DataNodeService` is the request-level front of a data
  node. `AddNewFileRequest`, `WriteRequest` and `AddFileSegRequest`
  carry a declared `size`. When that size does not match the content, or
  when a file is missing, the service raises `ServiceCancelled`.
  `get_file_size` returns -1 for an unknown file.
- `fsndn.commands`: the text command protocol. `Command` lists the
  commands, `parse_command` maps a word to a `Command` (unknown words give
  `Command.DEFAULT`), and `split_components` splits a request on spaces.
  Only pieces followed by a space count, so a request ends with a space.

## Example

```python
from pathlib import Path
from fsndn.fileblock import BlockStore
from fsndn.datanode import DataNode

store = BlockStore(Path("/tmp/fsndn-blocks"), seg_size=1024)
node = DataNode(node_size=1 << 20, store=store)

node.add_file_seg("/docs/a.txt", b"hello", 0)
print(node.get_file_seg("/docs/a.txt", 5, 0))   # b'hello'
print(node.space_size())                         # 1048571
```

## What it does not do

Everything here runs in one process. There is no network transport:
`DataNodeService` is called directly, and nothing listens on a socket.
There is no name node that assigns segments to data nodes. There is no
client that spreads a file across several data nodes. There is no
command-line program. `fsndn.commands` only parses command words and
requests; it does not carry them out.