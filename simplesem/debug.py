from __future__ import annotations

from typing import Optional, TextIO


class DebugOutput:
    """Leveled debug messages written to a file or to stdout.

    Nothing is written while `debug_level` is 0. A `debug_file` is opened
    lazily on the first message and stays open until `close()`. An
    object created with a `parent` follows the parent's current
    `debug_level` and writes through the parent.
    """
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = None,
                 parent: Optional['DebugOutput'] = None):
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[TextIO] = None
        self.parent = parent

    def debug(self, msg: str, level: int = 1):
        if self.parent is not None:
            if self.parent.debug_level < level:
                return
            self.parent.write(msg)
            return
        if self.debug_level < level:
            return
        self.write(msg)

    def write(self, msg: str):
        if self.debug_file is None:
            print(msg)
            return
        if self.debug_fp is None:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        self.debug_fp.write(msg + '\n')
        self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False
