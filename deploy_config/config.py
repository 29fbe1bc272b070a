# --------------------------------------------------
# config.py
# --------------------------------------------------
# This file resolves deployment configuration from three layers:
#
#   1. Environment variable APP_<SECTION>_<KEY> (upper-cased)
#   2. config.ini value for [section] key
#   3. Caller-supplied default
#
# Reading config never fails: anything missing or malformed
# falls through to the default.
#
# The process-wide resolver is built once by initialize()
# and read-only afterwards, so readers need no locking.
# --------------------------------------------------

import logging
import os
import re
import sys
from typing import Optional

from .schemas import DeploySettings
from .store import discover_store, load_store

logger = logging.getLogger(__name__)

ENV_PREFIX = "APP"

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}

# ASCII digits only: no whitespace, underscores or other scripts
INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def env_name(section: str, key: str) -> str:
    return f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"


class ConfigResolver:
    """
    Layered lookup over a parsed ConfigStore.

    environ defaults to os.environ and is read on every lookup,
    store is never modified after construction.
    """

    def __init__(self, store=None, environ=None):
        self.store = store if store is not None else {}
        self.environ = environ if environ is not None else os.environ

    @classmethod
    def from_file(cls, path, environ=None):
        return cls(load_store(path), environ)

    @classmethod
    def discover(cls, environ=None):
        return cls(discover_store(), environ)

    # --------------------------------------------------
    # Raw lookup
    # --------------------------------------------------

    def resolve(self, section: str, key: str, default=None):
        """
        Return the environment value, then the file value, then default.
        An environment variable set to "" still wins.
        """
        name = env_name(section, key)
        if name in self.environ:
            return self.environ[name]

        values = self.store.get(section)
        if values is not None and key in values:
            return values[key]

        return default

    # --------------------------------------------------
    # Typed accessors
    # --------------------------------------------------

    def get_int(self, section: str, key: str, default: int) -> int:
        raw = self.resolve(section, key, str(default))
        if not INT_PATTERN.fullmatch(raw):
            logger.debug({"msg": "ignoring non-integer value", "section": section, "key": key, "value": raw})
            return default
        return int(raw)

    def get_bool(self, section: str, key: str, default: bool) -> bool:
        raw = self.resolve(section, key, "true" if default else "false")
        value = raw.strip().lower()
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False

        logger.debug({"msg": "ignoring non-boolean value", "section": section, "key": key, "value": raw})
        return default

    # --------------------------------------------------
    # Precomputed bindings
    # --------------------------------------------------

    def build_settings(self) -> DeploySettings:
        return DeploySettings(
            app_name=self.resolve("app", "name", "flask-echo"),
            app_port=self.get_int("app", "port", 50100),
            app_host=self.resolve("server", "host", "0.0.0.0"),
            app_debug=self.get_bool("app", "debug", False),
            app_log_path=self.resolve("server", "log_path", "/app/log"),
            container_log_path=self.resolve("server", "container_log_path", "/var/log"),
            docker_image_name=self.resolve("docker", "image_name", "flask-echo"),
            docker_container_name=self.resolve("docker", "container_name", "flask-echo-container"),
        )


# --------------------------------------------------
# Process-wide state
# --------------------------------------------------

_resolver = None
_settings = None


def initialize(config_file=None, force: bool = False) -> DeploySettings:
    """
    Build the global resolver and settings once.

    Later calls return the cached settings unless force=True.
    config_file skips discovery and parses that path instead.
    """
    global _resolver, _settings

    if _settings is not None and not force:
        return _settings

    if config_file is not None:
        resolver = ConfigResolver.from_file(config_file)
    else:
        resolver = ConfigResolver.discover()

    _resolver = resolver
    _settings = resolver.build_settings()
    return _settings


def get_resolver() -> ConfigResolver:
    initialize()
    return _resolver


def get_settings() -> DeploySettings:
    return initialize()


def resolve(section: str, key: str, default=None):
    return get_resolver().resolve(section, key, default)


def get_int(section: str, key: str, default: int) -> int:
    return get_resolver().get_int(section, key, default)


def get_bool(section: str, key: str, default: bool) -> bool:
    return get_resolver().get_bool(section, key, default)


def print_all_configs(settings: Optional[DeploySettings] = None, file=None):
    """
    Print every precomputed binding for operator debugging.
    """
    if settings is None:
        settings = get_settings()
    out = file or sys.stdout

    print("=== Current configuration ===", file=out)
    for line in settings.dump_lines():
        print(line, file=out)
