from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from rich.console import Console

from . import config_path, setup_logger
from .classify import label_for
from .errors import LauncherError, LaunchFailed, NoVersionsFound, RootDirectoryMissing, SelectionCancelled
from .host import Host, LocalHost
from .launch import launch
from .models import ExecutableEntry, LauncherConfig, VersionCandidate
from .scanning import scan_versions
from .selection import resolve_executable
from .settings import load_config, save_config

log = logging.getLogger(__name__)

SKIP_DEFAULT_FLAGS = ("-n", "--n", "--no-default")

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_CANCELLED = 2

def split_args(argv: Sequence[str]) -> Tuple[bool, List[str]]:
    """Pull out the skip-default flag; everything else belongs to the engine."""
    skip = any(a in SKIP_DEFAULT_FLAGS for a in argv)
    rest = [a for a in argv if a not in SKIP_DEFAULT_FLAGS]
    return skip, rest

def _strip_outer_quotes(s: str) -> str:
    s = s.strip()
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        return s[1:-1].strip()
    return s

def _ask(console: Console, prompt: str) -> str:
    try:
        return console.input(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        console.print()
        return ""

def _parse_choice(raw: str, count: int) -> Optional[int]:
    """1-based answer -> 0-based index, None if unusable."""
    try:
        n = int(raw)
    except ValueError:
        return None
    return n - 1 if 1 <= n <= count else None

# ──────────────────────────────────────────────────────────────────────────────
# Prompts
# ──────────────────────────────────────────────────────────────────────────────

def prompt_root_directory(console: Console, host: Host) -> str:
    console.print("First run: set the Godot root directory (one folder per version).")
    console.print("Example:")
    console.print(r"   C:\GODOT" if host.windows else "   /home/user/GODOT", markup=False)

    raw = _strip_outer_quotes(_ask(console, "\nGodot root directory: "))
    if not raw:
        raise SelectionCancelled("Path cannot be empty.")
    root = Path(raw).expanduser()
    if not host.is_dir(root):
        raise RootDirectoryMissing(f"Path does not exist: {raw}")
    return str(root.resolve())

def prompt_version(console: Console, candidates: List[VersionCandidate]) -> VersionCandidate:
    console.print(f"\nFound {len(candidates)} Godot version(s):")
    for i, c in enumerate(candidates, 1):
        console.print(f"  [{i}] {c.identifier}", markup=False)

    raw = _ask(console, f"Version to launch (1-{len(candidates)}), Enter to cancel: ")
    if not raw:
        raise SelectionCancelled("Cancelled.")
    idx = _parse_choice(raw, len(candidates))
    if idx is None:
        raise SelectionCancelled("Invalid choice.")
    return candidates[idx]

def make_chooser(console: Console, version: str):
    def choose(entries: List[ExecutableEntry]) -> Optional[int]:
        console.print(f"\nSeveral executables in '{version}':", markup=False)
        for i, e in enumerate(entries, 1):
            console.print(f"  [{i}] {label_for(e.variant)} -> {e.path.name}", markup=False)
        return _parse_choice(_ask(console, f"Choose (1-{len(entries)}): "), len(entries))
    return choose

# ──────────────────────────────────────────────────────────────────────────────
# Flow
# ──────────────────────────────────────────────────────────────────────────────

def ensure_root(console: Console, config: LauncherConfig, config_file: Path, host: Host) -> Path:
    if not config.root_directory:
        config.root_directory = prompt_root_directory(console, host)
        save_config(config_file, config)
    root = Path(config.root_directory)
    if not host.is_dir(root):
        raise RootDirectoryMissing(f"Godot root directory does not exist: {root}")
    return root

def run_launcher(argv: Sequence[str], console: Console, config_file: Path, host: Optional[Host] = None) -> int:
    host = host or LocalHost()
    skip_default, passthrough = split_args(argv)

    console.print(f"Config file: {config_file}", markup=False)
    config = load_config(config_file)
    root = ensure_root(console, config, config_file, host)

    candidates = scan_versions(root, host)
    if not candidates:
        raise NoVersionsFound(f"No godot* executables found under {root}")

    version = prompt_version(console, candidates)
    exe = resolve_executable(
        version, config, config_file, make_chooser(console, version.identifier),
        skip_default=skip_default, host=host,
    )

    console.print(f"\nStarting {Path(exe).name} ...", markup=False)
    ok, msg = launch(exe, passthrough, host=host)
    if not ok:
        raise LaunchFailed(f"Launch failed: {msg}")
    console.print("Godot started, launcher exiting.")
    return EXIT_OK

def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None,
         config_file: Optional[Path] = None, host: Optional[Host] = None) -> int:
    setup_logger()
    console = console or Console(highlight=False)
    argv = sys.argv[1:] if argv is None else list(argv)
    config_file = config_file or config_path()
    try:
        return run_launcher(argv, console, config_file, host=host)
    except SelectionCancelled as e:
        log.info("%s", e)
        return EXIT_CANCELLED
    except LauncherError as e:
        log.error("%s", e)
        return EXIT_FATAL

def run() -> None:
    sys.exit(main())
