import logging
import os
import sys
from pathlib import Path

CONFIG_FILE_NAME = "Gdrun.json"
CONFIG_FILE = os.environ.get("GDRUN_CONFIG")
LOG_LEVEL = os.environ.get("GDRUN_LOG_LEVEL", "INFO")
ENGINE_PREFIX = os.environ.get("GDRUN_ENGINE_PREFIX", "godot")
# The tool's own folder usually sits next to the engine versions
RESERVED_DIR = os.environ.get("GDRUN_RESERVED_DIR", "Gdrun")
CONSOLE_MARKER = "console"
EXE_SUFFIX = ".exe"

def tool_dir() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(sys.argv[0]).resolve().parent

def config_path() -> Path:
    if CONFIG_FILE:
        return Path(CONFIG_FILE).expanduser().resolve()
    return tool_dir() / CONFIG_FILE_NAME

def setup_logger(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure the package logger once; repeated calls don't stack handlers."""
    logger = logging.getLogger("gdrun")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    logger.propagate = False

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(ch)
    return logger
