from pathlib import Path

import pytest

from cosmicterm import thumbnailer as module
from cosmicterm.thumbnailer import (
    Thumbnailer,
    ThumbnailerCache,
    parse_desktop_entry,
    thumbnailer,
    thumbnailer_search_dirs,
)


def write_entry(directory: Path, name: str, body: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(body, encoding="utf-8")
    return path


def test_command_substitutes_codes():
    source, dest = Path("/a/in.png"), Path("/b/out.png")
    cmd = Thumbnailer("gdk-pixbuf-thumbnailer -s %s %u %o").command(source, dest, 128)
    assert cmd == ["gdk-pixbuf-thumbnailer", "-s", "128", str(source), str(dest)]


def test_command_input_code_and_quotes():
    cmd = Thumbnailer("tool --label 'a b' %i").command("x.txt", "y.png", 64)
    assert cmd == ["tool", "--label", "a b", "x.txt"]


def test_command_unsupported_code():
    assert Thumbnailer("tool %x %o").command("in", "out", 1) is None


def test_command_empty_and_unbalanced():
    assert Thumbnailer("").command("in", "out", 1) is None
    assert Thumbnailer("tool 'open").command("in", "out", 1) is None


def test_parse_desktop_entry(tmp_path):
    path = write_entry(
        tmp_path,
        "a.thumbnailer",
        "# comment\n[Thumbnailer Entry]\nExec=tool %u %o\nMimeType=image/png;\n\n[Other]\nKey = value\n",
    )
    entry = parse_desktop_entry(path)
    assert entry["Thumbnailer Entry"] == {"Exec": "tool %u %o", "MimeType": "image/png;"}
    assert entry["Other"] == {"Key": "value"}


@pytest.mark.parametrize("body", ["Exec=tool\n", "[Entry]\nno equals sign\n", "[Broken\nA=b\n"])
def test_parse_desktop_entry_malformed(tmp_path, body):
    path = write_entry(tmp_path, "bad.thumbnailer", body)
    with pytest.raises(ValueError):
        parse_desktop_entry(path)


def test_search_dirs_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_DATA_DIRS", f"{tmp_path / 'one'}:relative:{tmp_path / 'two'}")
    assert thumbnailer_search_dirs() == [
        tmp_path / "home" / "thumbnailers",
        tmp_path / "one" / "thumbnailers",
        tmp_path / "two" / "thumbnailers",
    ]


def test_search_dirs_defaults(monkeypatch):
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.delenv("XDG_DATA_DIRS", raising=False)
    dirs = thumbnailer_search_dirs()
    assert dirs[0] == Path.home() / ".local" / "share" / "thumbnailers"
    assert dirs[1:] == [Path("/usr/local/share/thumbnailers"), Path("/usr/share/thumbnailers")]


def test_cache_loads_entries(tmp_path):
    first, second = tmp_path / "first", tmp_path / "second"
    write_entry(
        first,
        "a.thumbnailer",
        "[Thumbnailer Entry]\nExec=alpha %u %o\nMimeType=image/png;image/jpeg;\n",
    )
    write_entry(second, "b.thumbnailer", "[Thumbnailer Entry]\nExec=beta %i %o\nMimeType=image/png\n")
    write_entry(second, "c.thumbnailer", "[Thumbnailer Entry]\nMimeType=image/gif;\n")
    write_entry(second, "d.thumbnailer", "[Thumbnailer Entry]\nExec=delta\n")
    write_entry(second, "e.thumbnailer", "garbage\n")

    cache = ThumbnailerCache([first, tmp_path / "missing", second])
    assert cache.get("image/png") == [Thumbnailer("alpha %u %o"), Thumbnailer("beta %i %o")]
    assert cache.get("IMAGE/JPEG") == [Thumbnailer("alpha %u %o")]
    assert cache.get("image/gif") == []
    assert cache.get("not a mime") == []


def test_cache_reload_picks_up_changes(tmp_path):
    cache = ThumbnailerCache([tmp_path])
    assert cache.get("image/png") == []
    write_entry(tmp_path, "a.thumbnailer", "[Thumbnailer Entry]\nExec=alpha\nMimeType=image/png;\n")
    cache.reload()
    assert cache.get("image/png") == [Thumbnailer("alpha")]


def test_get_returns_copy(tmp_path):
    write_entry(tmp_path, "a.thumbnailer", "[Thumbnailer Entry]\nExec=alpha\nMimeType=image/png;\n")
    cache = ThumbnailerCache([tmp_path])
    cache.get("image/png").clear()
    assert cache.get("image/png") == [Thumbnailer("alpha")]


def test_shared_cache_uses_environment(tmp_path, monkeypatch):
    write_entry(
        tmp_path / "home" / "thumbnailers",
        "a.thumbnailer",
        "[Thumbnailer Entry]\nExec=shared %u %o\nMimeType=text/plain;\n",
    )
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_DATA_DIRS", str(tmp_path / "none"))
    monkeypatch.setattr(module, "_CACHE", None)
    assert thumbnailer("text/plain") == [Thumbnailer("shared %u %o")]
    assert thumbnailer("text/html") == []