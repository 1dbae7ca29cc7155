import logging
from pathlib import Path
from typing import Callable, List, Optional

from .classify import label_for, variant_of
from .errors import NoExecutableFound, SelectionCancelled
from .host import Host, LocalHost
from .models import ExecutableEntry, LauncherConfig, VersionCandidate
from .scanning import list_executables
from .settings import save_config

log = logging.getLogger(__name__)

Chooser = Callable[[List[ExecutableEntry]], Optional[int]]

def remembered_default(candidate: VersionCandidate, config: LauncherConfig, host: Host) -> Optional[str]:
    saved = config.default_executables.get(candidate.identifier)
    if not saved:
        return None
    if host.file_exists(Path(saved)):
        log.info("Using last default for %s: %s -> %s", candidate.identifier,
                 label_for(variant_of(saved)), Path(saved).name)
        return saved
    log.info("Default for %s is gone (%s), re-selecting", candidate.identifier, saved)
    return None

def pick_from(entries: List[ExecutableEntry], choose: Chooser) -> ExecutableEntry:
    if len(entries) == 1:
        log.info("Auto-selected %s -> %s", label_for(entries[0].variant), entries[0].path.name)
        return entries[0]
    idx = choose(entries)
    if idx is None or not 0 <= idx < len(entries):
        raise SelectionCancelled("Invalid choice, cancelled.")
    return entries[idx]

def resolve_executable(
    candidate: VersionCandidate,
    config: LauncherConfig,
    config_file: Path,
    choose: Chooser,
    *,
    skip_default: bool = False,
    host: Optional[Host] = None,
) -> str:
    """
    Settle on one executable for `candidate` and remember it.

    The remembered default wins when it still exists and `skip_default` is off.
    Otherwise the version folder is enumerated: one hit is taken as-is, several
    go through `choose`, which gets them editors first and returns a 0-based
    index or None. The winner overwrites the version's default and the config
    is written straight away.
    """
    host = host or LocalHost()
    chosen = None
    if skip_default:
        log.info("Skipping remembered default for %s", candidate.identifier)
    else:
        chosen = remembered_default(candidate, config, host)

    if chosen is None:
        entries = list_executables(candidate.directory, host)
        if not entries:
            raise NoExecutableFound(f"No engine executable found in {candidate.directory}")
        chosen = str(pick_from(entries, choose).path)

    config.default_executables[candidate.identifier] = chosen
    save_config(config_file, config)
    return chosen
