# gdrun/launch.py
from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .host import Host, LocalHost

log = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# Small helpers
# ──────────────────────────────────────────────────────────────────────────────

def build_argv(executable: Union[Path, str], args: Sequence[str]) -> List[str]:
    return [str(executable)] + list(args)

def format_command_line(argv: Sequence[str], windows: bool) -> str:
    """How the command reads on this platform's command line (for logs)."""
    if windows:
        return subprocess.list2cmdline(list(argv))
    return shlex.join(list(argv))

# ──────────────────────────────────────────────────────────────────────────────
# Public API
# ──────────────────────────────────────────────────────────────────────────────

def launch(executable: Union[Path, str], args: Sequence[str], host: Optional[Host] = None) -> Tuple[bool, str]:
    """
    Start `executable` detached from this process, forwarding `args` verbatim.

    Arguments travel as a list, so each one stays a single token in the
    child no matter what spaces or quotes it holds. Nothing waits on the child.
    """
    host = host or LocalHost()
    argv = build_argv(executable, args)
    log.debug("Spawning: %s", format_command_line(argv, host.windows))
    try:
        host.spawn_detached(argv)
    except OSError as e:
        return False, str(e)
    return True, "Launched."
