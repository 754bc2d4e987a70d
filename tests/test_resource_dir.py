import os
from pathlib import Path

from savplayer.resource_dir import search_and_set_resource_dir


def _cwd() -> Path:
    return Path(os.getcwd()).resolve()


def test_found_in_working_directory(tmp_path, monkeypatch):
    (tmp_path / "resources").mkdir()
    monkeypatch.chdir(tmp_path)
    assert search_and_set_resource_dir("resources", tmp_path / "elsewhere") is True
    assert _cwd() == (tmp_path / "resources").resolve()


def test_found_in_application_directory(tmp_path, monkeypatch):
    app = tmp_path / "app"
    (app / "resources").mkdir(parents=True)
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("resources", app) is True
    assert _cwd() == (app / "resources").resolve()


def test_found_three_levels_up(tmp_path, monkeypatch):
    app = tmp_path / "a" / "b" / "c"
    app.mkdir(parents=True)
    (tmp_path / "resources").mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("resources", app) is True
    assert _cwd() == (tmp_path / "resources").resolve()


def test_not_found_beyond_three_levels(tmp_path, monkeypatch):
    app = tmp_path / "a" / "b" / "c" / "d"
    app.mkdir(parents=True)
    (tmp_path / "resources").mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("resources", app) is False
    assert _cwd() == work.resolve()


def test_working_directory_preferred_over_app_dir(tmp_path, monkeypatch):
    work = tmp_path / "work"
    (work / "resources").mkdir(parents=True)
    app = tmp_path / "app"
    (app / "resources").mkdir(parents=True)
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("resources", app) is True
    assert _cwd() == (work / "resources").resolve()


def test_regular_file_is_not_a_resource_dir(tmp_path, monkeypatch):
    (tmp_path / "resources").write_text("not a directory")
    monkeypatch.chdir(tmp_path)
    assert search_and_set_resource_dir("resources", tmp_path) is False
    assert _cwd() == tmp_path.resolve()