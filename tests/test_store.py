# --------------------------------------------------
# test_store.py
# --------------------------------------------------
# Purpose:
#   Validate config.ini parsing and file discovery.
#
# Expectations:
#   - Sections, comments and quotes handled per the INI rules
#   - key = value lines before any [section] are dropped
#   - Missing / unreadable files never raise
# --------------------------------------------------

import logging

from deploy_config.store import find_config_file, load_store, discover_store, parse_lines


def test_parse_sections_comments_and_quotes(tmp_path, write_ini):
    path = write_ini(tmp_path / "config.ini", """
; leading comment
# another comment

[app]
name = "my app"
port=8080
title = 'quoted'
url = http://x/?a=b
not a key value line

[server]
host = 127.0.0.1
""")

    store = load_store(path)

    assert store == {
        "app": {"name": "my app", "port": "8080", "title": "quoted", "url": "http://x/?a=b"},
        "server": {"host": "127.0.0.1"},
    }


def test_lines_before_any_section_are_dropped():
    store = {}
    parse_lines(["port=1234", "name = early", "[app]", "debug = yes"], store)

    assert store == {"app": {"debug": "yes"}}


def test_names_are_case_sensitive_and_headers_trimmed():
    store = {}
    parse_lines(["[ App ]", "Port = 1", "[app]", "port = 2"], store)

    assert store == {"App": {"Port": "1"}, "app": {"port": "2"}}


def test_repeated_section_reopens_and_overwrites():
    store = {}
    parse_lines(["[app]", "port = 1", "name = a", "[docker]", "[app]", "port = 2"], store)

    assert store == {"app": {"port": "2", "name": "a"}, "docker": {}}


def test_empty_value_is_kept():
    store = {}
    parse_lines(["[app]", "name =", 'title = ""'], store)

    assert store == {"app": {"name": "", "title": ""}}


def test_missing_file_returns_empty_store_and_warns(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        store = load_store(tmp_path / "nope.ini")

    assert store == {}
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_decode_error_keeps_sections_parsed_before_failure(tmp_path, caplog):
    path = tmp_path / "config.ini"
    path.write_bytes(b"[app]\nname = ok\n[server]\nhost = \xff\xfe\nport = 1\n")

    with caplog.at_level(logging.WARNING):
        store = load_store(path)

    assert store == {"app": {"name": "ok"}, "server": {}}
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_discovery_prefers_executable_dir(isolated, write_ini):
    exe_file = write_ini(isolated["exedir"] / "config.ini", "[app]\nname = exe\n")
    write_ini(isolated["workdir"] / "config" / "config.ini", "[app]\nname = cwd\n")

    assert find_config_file() == exe_file
    assert discover_store() == {"app": {"name": "exe"}}


def test_discovery_falls_back_to_cwd_config_dir(isolated, write_ini):
    cwd_file = write_ini(isolated["workdir"] / "config" / "config.ini", "[app]\nname = cwd\n")

    assert find_config_file().resolve() == cwd_file.resolve()
    assert discover_store() == {"app": {"name": "cwd"}}


def test_discovery_without_any_file_warns(caplog):
    with caplog.at_level(logging.WARNING):
        assert find_config_file() is None
        assert discover_store() == {}

    assert any(r.levelno == logging.WARNING for r in caplog.records)
