"""Named-data file storage: inodes, segmented file blocks, data nodes and command parsing."""

__version__ = "0.1.0"
__all__ = ["inode", "fileblock", "inodefile", "inodedirectory", "datanode", "service", "commands"]