import logging
import os
import sys
from pathlib import Path

import pytest

# Ensure project root import
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class MemoryHost:
    """In-memory stand-in for gdrun.host.LocalHost."""

    def __init__(self, windows: bool = True):
        self.windows = windows
        self.dirs = set()
        self.files = {}          # Path -> owner-exec bit
        self.unreadable = set()
        self.listed = []
        self.spawned = []
        self.spawn_error = None

    def add_dir(self, path):
        p = Path(path)
        while p != p.parent:
            self.dirs.add(p)
            p = p.parent
        return Path(path)

    def add_file(self, path, executable: bool = True):
        p = Path(path)
        self.add_dir(p.parent)
        self.files[p] = executable
        return p

    def list_dir(self, path):
        path = Path(path)
        self.listed.append(path)
        if path in self.unreadable:
            raise PermissionError(f"Permission denied: '{path}'")
        if path not in self.dirs:
            raise FileNotFoundError(f"No such directory: '{path}'")
        kids = [d for d in self.dirs if d.parent == path] + [f for f in self.files if f.parent == path]
        return sorted(kids, key=str, reverse=True)   # deliberately unsorted-looking

    def is_dir(self, path):
        return Path(path) in self.dirs

    def file_exists(self, path):
        return Path(path) in self.files

    def is_executable_bit(self, path):
        return self.files.get(Path(path), False)

    def spawn_detached(self, argv):
        if self.spawn_error is not None:
            raise self.spawn_error
        self.spawned.append(list(argv))


def touch(p: Path, mode: int = 0o755, data: bytes = b"") -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data or b"stub")
    os.chmod(p, mode)
    return p


@pytest.fixture
def host():
    return MemoryHost(windows=True)


@pytest.fixture
def posix_host():
    return MemoryHost(windows=False)


@pytest.fixture(autouse=True)
def _reset_gdrun_logger():
    yield
    logger = logging.getLogger("gdrun")
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
