import json
import logging
from pathlib import Path
from typing import Dict

from .models import LauncherConfig

log = logging.getLogger(__name__)

# (current key, key written by the old .NET launcher)
ROOT_KEYS = ("rootDirectory", "GodotRoot")
DEFAULTS_KEYS = ("defaultExecutables", "DefaultExecutables")

def _pick(data: dict, keys):
    for k in keys:
        if k in data:
            return data[k]
    return None

def config_from_dict(data) -> LauncherConfig:
    """Strict: any field of the wrong shape rejects the whole document."""
    if not isinstance(data, dict):
        raise ValueError("top level must be an object")

    root = _pick(data, ROOT_KEYS)
    if root is not None and not isinstance(root, str):
        raise ValueError("rootDirectory must be a string or null")

    raw = _pick(data, DEFAULTS_KEYS)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError("defaultExecutables must be an object")
    defaults: Dict[str, str] = {}
    for k, v in raw.items():
        if not isinstance(v, str):
            raise ValueError(f"defaultExecutables[{k!r}] must be a string")
        defaults[k] = v

    return LauncherConfig(root_directory=root, default_executables=defaults)

def config_to_dict(config: LauncherConfig) -> dict:
    return {
        "rootDirectory": config.root_directory,
        "defaultExecutables": dict(sorted(config.default_executables.items())),
    }

def load_config(config_file: Path) -> LauncherConfig:
    config_file = Path(config_file)
    try:
        if not config_file.exists():
            log.debug("No config at %s, starting empty", config_file)
            return LauncherConfig()
        data = json.loads(config_file.read_text("utf-8"))
        return config_from_dict(data)
    except (OSError, ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors too;
        # very deep nesting overflows the decoder (RecursionError)
        log.warning("Could not read config %s, using defaults: %s", config_file, e)
        return LauncherConfig()

def save_config(config_file: Path, config: LauncherConfig) -> bool:
    config_file = Path(config_file)
    text = json.dumps(config_to_dict(config), indent=2, ensure_ascii=False)
    try:
        config_file.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        log.warning("Could not save config %s: %s", config_file, e)
        return False
    log.info("Config saved to %s", config_file)
    return True
