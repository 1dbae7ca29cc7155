import os
import stat
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable

@runtime_checkable
class Host(Protocol):
    """OS services gdrun touches; LocalHost is the real one."""

    windows: bool

    def list_dir(self, path: Path) -> List[Path]: ...

    def is_dir(self, path: Path) -> bool: ...

    def file_exists(self, path: Path) -> bool: ...

    def is_executable_bit(self, path: Path) -> bool: ...

    def spawn_detached(self, argv: List[str]) -> None: ...

def is_windows() -> bool:
    return os.name == "nt"

class LocalHost:
    """
    The handful of OS services the scanner, classifier and launcher need.
    Tests substitute an in-memory object with the same methods.
    """

    def __init__(self, windows: Optional[bool] = None):
        self.windows = is_windows() if windows is None else windows

    def list_dir(self, path: Path) -> List[Path]:
        # PermissionError / FileNotFoundError propagate; callers decide
        return list(Path(path).iterdir())

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def file_exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def is_executable_bit(self, path: Path) -> bool:
        try:
            return bool(os.stat(path).st_mode & stat.S_IXUSR)
        except OSError:
            return False

    def spawn_detached(self, argv: List[str]) -> None:
        kw = dict(
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
        )
        if self.windows:
            kw["creationflags"] = (
                getattr(subprocess, "DETACHED_PROCESS", 0x00000008)
                | getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0x00000200)
            )
        else:
            kw["start_new_session"] = True
        subprocess.Popen(argv, **kw)
