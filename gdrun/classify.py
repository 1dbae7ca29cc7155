from pathlib import Path

from . import CONSOLE_MARKER, ENGINE_PREFIX, EXE_SUFFIX
from .host import Host
from .models import Variant

LABELS = {
    Variant.EDITOR: "Editor (GUI)",
    Variant.CONSOLE: "Console",
}

def is_executable(path: Path, host: Host) -> bool:
    p = Path(path)
    if host.windows:
        return p.suffix.lower() == EXE_SUFFIX
    return host.is_executable_bit(p)

def is_qualifying_executable(path: Path, host: Host, prefix: str = ENGINE_PREFIX) -> bool:
    p = Path(path)
    if not p.name.lower().startswith(prefix.lower()):
        return False
    return is_executable(p, host)

def variant_of(path: Path) -> Variant:
    stem = Path(path).stem.lower()
    return Variant.CONSOLE if CONSOLE_MARKER in stem else Variant.EDITOR

def label_for(variant: Variant) -> str:
    return LABELS[variant]
