"""Read version values from files and git history."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Protocol

import yaml

from version_guard.utils.key_path import lookup, scalar_to_str

logger = logging.getLogger(__name__)

# BaseLoader keeps scalars as written ("1.10" stays "1.10"); prefer the
# C-accelerated variant when available.
_YamlLoader = getattr(yaml, "CBaseLoader", yaml.BaseLoader)

_YAML_SUFFIXES = {".yaml", ".yml"}

# Plain YAML spellings of null, left as strings by BaseLoader.
_YAML_NULLS = {"", "~", "null", "Null", "NULL"}


class SourceUnreadable(Exception):
    """A source file exists but no version could be extracted from it."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class VersionReader(Protocol):
    """Capability interface used by source discovery."""

    def read_version_field(self, path: Path, key: str | None) -> str | None: ...

    def latest_tag(self, root: Path) -> str | None: ...


class ProjectReader:
    """Filesystem and git backed :class:`VersionReader`."""

    def __init__(self, git_binary: str = "git", git_timeout: float = 10.0):
        self.git_binary = git_binary
        self.git_timeout = git_timeout

    def read_version_field(self, path: Path, key: str | None) -> str | None:
        """Return the trimmed version at ``key`` in ``path``.

        With ``key`` None the whole file is the version. Missing files and
        missing/null fields yield None; so does anything unparseable.
        """
        if not path.is_file():
            return None
        try:
            if key is None:
                value: str | None = _read_text(path)
            else:
                value = scalar_to_str(lookup(_load_structured(path), key))
                if path.suffix.lower() in _YAML_SUFFIXES and value in _YAML_NULLS:
                    value = None
        except SourceUnreadable:
            logger.debug("Skipping unreadable source %s", path, exc_info=True)
            return None
        return _clean(value)

    def latest_tag(self, root: Path) -> str | None:
        """Return the nearest tag reachable from HEAD, or None."""
        cmd = [self.git_binary, "describe", "--tags", "--abbrev=0"]
        try:
            proc = subprocess.run(
                cmd,
                cwd=root,
                capture_output=True,
                text=True,
                timeout=self.git_timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired):
            logger.debug("Could not run %s in %s", " ".join(cmd), root, exc_info=True)
            return None
        if proc.returncode != 0:
            logger.debug("git describe failed in %s: %s", root, proc.stderr.strip())
            return None
        return _clean(proc.stdout)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(path, str(e)) from e


def _load_structured(path: Path) -> object:
    """Parse a JSON or YAML file, choosing the parser by suffix."""
    text = _read_text(path)
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.load(text, Loader=_YamlLoader)
        except yaml.YAMLError as e:
            raise SourceUnreadable(path, f"invalid YAML: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SourceUnreadable(path, f"invalid JSON: {e}") from e
