from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

class Variant(str, Enum):
    EDITOR = "editor"
    CONSOLE = "console"

@dataclass
class LauncherConfig:
    root_directory: Optional[str] = None
    default_executables: Dict[str, str] = field(default_factory=dict)  # version -> abs path

    def __post_init__(self):
        # an empty root means "not set yet"
        if not self.root_directory:
            self.root_directory = None

@dataclass(frozen=True)
class VersionCandidate:
    identifier: str     # bare folder name, case preserved
    directory: Path

@dataclass(frozen=True)
class ExecutableEntry:
    path: Path
    variant: Variant

    def sort_key(self):
        return (self.variant is Variant.CONSOLE, str(self.path))
