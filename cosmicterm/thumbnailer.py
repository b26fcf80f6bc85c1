"""Discovery of desktop thumbnailers and construction of their command lines."""

from __future__ import annotations

import logging
import os
import re
import shlex
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

log = logging.getLogger(__name__)

_MIME_RE = re.compile(r"^[A-Za-z0-9!#$&^_.+-]+/[A-Za-z0-9!#$&^_.+-]+$")


@dataclass(frozen=True)
class Thumbnailer:
    """A thumbnailer described by the Exec line of its entry."""

    exec: str

    def command(self, input_path, output_path, thumbnail_size: int) -> Optional[list[str]]:
        """The argument list to run, or None if the Exec line is unusable."""
        try:
            args = shlex.split(self.exec)
        except ValueError:
            return None
        if not args:
            return None

        command = [args[0]]
        for arg in args[1:]:
            if not arg.startswith("%"):
                command.append(arg)
            elif arg in ("%i", "%u"):
                command.append(str(input_path))
            elif arg == "%o":
                command.append(str(output_path))
            elif arg == "%s":
                command.append(str(thumbnail_size))
            else:
                log.warning("unsupported thumbnailer Exec code %r in %r", arg, self.exec)
                return None
        return command


def parse_desktop_entry(path) -> dict[str, dict[str, str]]:
    """Parse a desktop entry file into sections of key/value pairs."""
    sections: dict[str, dict[str, str]] = {}
    current: Optional[dict[str, str]] = None
    text = Path(path).read_text(encoding="utf-8")
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("["):
            if not line.endswith("]"):
                raise ValueError(f"{path}:{number}: malformed section header")
            current = sections.setdefault(line[1:-1], {})
            continue
        key, sep, value = line.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"{path}:{number}: expected key=value")
        if current is None:
            raise ValueError(f"{path}:{number}: entry outside of a section")
        current[key.strip()] = value.strip()
    return sections


def thumbnailer_search_dirs() -> list[Path]:
    """The XDG data directories' thumbnailers folders, most specific first."""
    data_home = os.environ.get("XDG_DATA_HOME", "")
    home = Path(data_home) if os.path.isabs(data_home) else Path.home() / ".local" / "share"
    dirs_env = os.environ.get("XDG_DATA_DIRS", "")
    data_dirs = [Path(d) for d in dirs_env.split(":") if os.path.isabs(d)]
    if not data_dirs:
        data_dirs = [Path("/usr/local/share"), Path("/usr/share")]
    return [d / "thumbnailers" for d in [home, *data_dirs]]


def _normalize_mime(mime: str) -> Optional[str]:
    mime = mime.strip().lower()
    return mime if _MIME_RE.match(mime) else None


class ThumbnailerCache:
    """Thumbnailers known on this system, by MIME type."""

    def __init__(self, search_dirs: Optional[Iterable] = None) -> None:
        self._search_dirs = None if search_dirs is None else [Path(d) for d in search_dirs]
        self._cache: dict[str, list[Thumbnailer]] = {}
        self.reload()

    def _entry_paths(self) -> list[Path]:
        dirs = self._search_dirs if self._search_dirs is not None else thumbnailer_search_dirs()
        paths: list[Path] = []
        for directory in dirs:
            log.debug("looking for thumbnailers in %s", directory)
            try:
                paths.extend(sorted(directory.iterdir()))
            except OSError as err:
                log.warning("failed to read directory %s: %s", directory, err)
        return paths

    def reload(self) -> None:
        """Scan the search directories again."""
        start = time.monotonic()
        self._cache.clear()
        for path in self._entry_paths():
            try:
                entry = parse_desktop_entry(path)
            except (OSError, ValueError, UnicodeDecodeError) as err:
                log.warning("failed to parse %s: %s", path, err)
                continue

            section = entry.get("Thumbnailer Entry", {})
            exec_line = section.get("Exec")
            if exec_line is None:
                log.warning("missing Exec attribute for thumbnailer %s", path)
                continue
            mime_types = section.get("MimeType")
            if mime_types is None:
                log.warning("missing MimeType attribute for thumbnailer %s", path)
                continue

            parts = mime_types.split(";")
            if parts and parts[-1] == "":
                parts.pop()
            for part in parts:
                mime = _normalize_mime(part)
                if mime is not None:
                    log.debug("thumbnailer %s=%s", mime, path)
                    self._cache.setdefault(mime, []).append(Thumbnailer(exec_line))

        log.info("loaded thumbnailer cache in %.3fs", time.monotonic() - start)

    def get(self, mime: str) -> list[Thumbnailer]:
        """Thumbnailers for a MIME type, in discovery order."""
        key = _normalize_mime(mime)
        return list(self._cache.get(key, [])) if key else []


_CACHE: Optional[ThumbnailerCache] = None
_CACHE_LOCK = threading.Lock()


def thumbnailer(mime: str) -> list[Thumbnailer]:
    """Thumbnailers for a MIME type from the shared, lazily built cache."""
    global _CACHE
    with _CACHE_LOCK:
        if _CACHE is None:
            _CACHE = ThumbnailerCache()
        return _CACHE.get(mime)