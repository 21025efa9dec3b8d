"""Commands understood by the local client front end, and their parsing."""

from __future__ import annotations

from enum import IntEnum

MAX_TEXT = 256
BACK_LOG = 1000
BUFFER_SIZE = 2048
SOCKET_PATH = "./namo_amitabha"
SEG_SIZE = 1048576


class Command(IntEnum):
    QUIT = 0
    SEND = 1
    DEFAULT = 2
    GETATTR = 3
    OPEN = 4
    READ = 5
    WRITE = 6
    RELEASE = 7
    MKNOD = 8
    RM = 9
    MKDIR = 10
    RMDIR = 11
    READDIR = 12


_WORDS = {
    "quit": Command.QUIT,
    "send": Command.SEND,
    "getattr": Command.GETATTR,
    "open": Command.OPEN,
    "read": Command.READ,
    "write": Command.WRITE,
    "release": Command.RELEASE,
    "mknod": Command.MKNOD,
    "rm": Command.RM,
    "mkdir": Command.MKDIR,
    "readdir": Command.READDIR,
    "rmdir": Command.RMDIR,
}


def parse_command(word: str) -> Command:
    """Map a command word to its Command; unknown words give DEFAULT."""
    return _WORDS.get(word, Command.DEFAULT)


def split_components(buffer: str) -> list[str]:
    """Split a request on spaces.

    Only pieces followed by a space count, so a request ends with a space;
    empty pieces are dropped.
    """
    return [piece for piece in buffer.split(" ")[:-1] if piece]