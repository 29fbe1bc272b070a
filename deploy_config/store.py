# --------------------------------------------------
# store.py
# --------------------------------------------------
# This file builds the in-memory ConfigStore from config.ini.
#
# Responsibilities:
#   ✔ Locate config.ini (next to the executable, then ./config/)
#   ✔ Parse the INI-style file into section -> key -> value
#   ✔ Fail open: missing or unreadable files only log a warning
#
# Format notes:
#   - Blank lines and lines starting with ; or # are skipped
#   - [section] opens a new section context
#   - key = value splits on the first "=" only
#   - Quotes around values are stripped, nothing else is unescaped
#   - key = value lines before any [section] are dropped
# --------------------------------------------------

import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.ini"

# section -> key -> raw string value
ConfigStore = Dict[str, Dict[str, str]]


# --------------------------------------------------
# File Discovery
# --------------------------------------------------

def executable_dir() -> Path:
    """
    Directory of the running program.

    A frozen build (PyInstaller and friends) is its own executable;
    otherwise the launched script stands in for it.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent

    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not script or script == "-c":
        return Path.cwd()
    return Path(script).resolve().parent


def candidate_paths() -> List[Path]:
    """
    Discovery order: first existing path wins.
    """
    return [
        executable_dir() / CONFIG_FILENAME,
        Path(os.getcwd()) / "config" / CONFIG_FILENAME,
    ]


def find_config_file() -> Optional[Path]:
    """
    Return the first config.ini that exists, or None after logging
    a warning that lists every attempted path.
    """
    paths = candidate_paths()
    for path in paths:
        if path.is_file():
            return path

    logger.warning({
        "msg": "config file not found, using environment and defaults only",
        "tried": [str(p) for p in paths],
    })
    return None


# --------------------------------------------------
# Parsing
# --------------------------------------------------

def strip_quotes(value: str) -> str:
    return value.strip("\"'")


def parse_lines(lines, store: ConfigStore) -> None:
    """
    Feed decoded lines into store.

    The store is updated in place so a caller that hits a read error
    half-way through keeps everything parsed so far.
    """
    current_section = ""

    for raw in lines:
        line = raw.strip()

        # Skip blanks and comments
        if not line or line.startswith(";") or line.startswith("#"):
            continue

        if line.startswith("[") and line.endswith("]"):
            current_section = line[1:-1].strip()
            store.setdefault(current_section, {})
            continue

        if "=" not in line:
            continue

        key, value = line.split("=", 1)

        # No section yet: nothing to attach to
        if not current_section:
            continue

        store[current_section][key.strip()] = strip_quotes(value.strip())


def _decoded_lines(fh):
    # Decode per line so a bad byte only loses the lines after it
    for raw in fh:
        yield raw.decode("utf-8")


def load_store(path) -> ConfigStore:
    """
    Parse config file at path into a fresh ConfigStore.

    Open, read and decode errors are logged as warnings and whatever
    was parsed before the failure is returned.
    """
    store: ConfigStore = {}

    try:
        with open(path, "rb") as fh:
            parse_lines(_decoded_lines(fh), store)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning({
            "msg": "config file parse failed, using environment and defaults only",
            "path": str(path),
            "error": str(exc),
        })
        return store

    logger.debug({"msg": "config file loaded", "path": str(path), "sections": sorted(store)})
    return store


def discover_store() -> ConfigStore:
    """
    Run discovery and parse the file that was found, if any.
    """
    path = find_config_file()
    if path is None:
        return {}
    return load_store(path)
