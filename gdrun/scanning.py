import logging
from pathlib import Path
from typing import List, Optional

from . import RESERVED_DIR
from .classify import is_qualifying_executable, variant_of
from .host import Host, LocalHost
from .models import ExecutableEntry, VersionCandidate

log = logging.getLogger(__name__)

def _entries(directory: Path, host: Host) -> List[Path]:
    try:
        return host.list_dir(directory)
    except OSError as e:
        log.debug("Skipping unreadable directory %s: %s", directory, e)
        return []

def list_executables(directory: Path, host: Optional[Host] = None) -> List[ExecutableEntry]:
    """Qualifying files directly inside `directory`, editors first, then by path."""
    host = host or LocalHost()
    items: List[ExecutableEntry] = []
    for p in _entries(directory, host):
        if host.file_exists(p) and is_qualifying_executable(p, host):
            items.append(ExecutableEntry(path=p, variant=variant_of(p)))
    return sorted(items, key=ExecutableEntry.sort_key)

def has_executable(directory: Path, host: Host) -> bool:
    return any(
        host.file_exists(p) and is_qualifying_executable(p, host)
        for p in _entries(directory, host)
    )

def scan_versions(root: Path, host: Optional[Host] = None, reserved: Optional[str] = RESERVED_DIR) -> List[VersionCandidate]:
    host = host or LocalHost()
    root = Path(root)
    found: List[VersionCandidate] = []
    for d in _entries(root, host):
        if not host.is_dir(d):
            continue
        if reserved and d.name.lower() == reserved.lower():
            continue
        if has_executable(d, host):
            found.append(VersionCandidate(identifier=d.name, directory=d))
        else:
            log.debug("No engine executable in %s", d)
    found.sort(key=lambda c: c.identifier)
    return found
