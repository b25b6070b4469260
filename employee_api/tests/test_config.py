from __future__ import annotations

import pytest

from employee_api import db
from employee_api.__main__ import parse_bind


def test_db_path_prefers_explicit_then_env(tmp_path, monkeypatch):
    monkeypatch.setenv("EMPLOYEE_DB", str(tmp_path / "env.db"))
    assert db.get_db_path(str(tmp_path / "arg.db")) == str(tmp_path / "arg.db")
    assert db.get_db_path() == str(tmp_path / "env.db")


def test_db_path_from_config_yaml(tmp_path, monkeypatch):
    monkeypatch.delenv("EMPLOYEE_DB", raising=False)
    target = tmp_path / "data" / "staff.db"
    (tmp_path / "config.yaml").write_text(f"db_path: {target}\n", encoding="utf-8")
    monkeypatch.setattr(db, "_PROJECT_ROOT", str(tmp_path))

    assert db.get_db_path() == str(target)
    assert target.parent.is_dir()


def test_db_path_default(tmp_path, monkeypatch):
    monkeypatch.delenv("EMPLOYEE_DB", raising=False)
    monkeypatch.setattr(db, "_PROJECT_ROOT", str(tmp_path))
    assert db.get_db_path() == "employees.db"


@pytest.mark.parametrize(
    "bind,expected",
    [(":8080", ("0.0.0.0", 8080)), ("127.0.0.1:9000", ("127.0.0.1", 9000))],
)
def test_parse_bind(bind, expected):
    assert parse_bind(bind) == expected


@pytest.mark.parametrize("bind", ["8080", "host:", "host:http"])
def test_parse_bind_rejects_garbage(bind):
    with pytest.raises(ValueError):
        parse_bind(bind)


def test_importing_api_has_no_side_effects(tmp_path, monkeypatch):
    import importlib
    from employee_api import api

    target_dir = tmp_path / "not-yet"
    monkeypatch.setenv("EMPLOYEE_DB", str(target_dir / "employees.db"))
    importlib.reload(api)

    assert not target_dir.exists()
    assert not hasattr(api, "app")
