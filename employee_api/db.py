from __future__ import annotations

# employee_api/db.py
import sqlite3
from contextlib import contextmanager
from typing import Iterator
import os
import yaml
from fastapi import Request

# DB path resolution order:
# 1) explicit argument
# 2) env EMPLOYEE_DB
# 3) db_path in config.yaml at the project root
# 4) employees.db in the working directory
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
DEFAULT_DB_PATH = "employees.db"


def _read_config_yaml() -> dict:
    cfg_path = os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    with open(cfg_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    out = {}
    v = cfg.get("db_path")
    if isinstance(v, str) and v.strip():
        out["db_path"] = v.strip()
    return out


def get_db_path(db_path: str | None = None) -> str:
    if db_path:
        path = db_path
    elif os.environ.get("EMPLOYEE_DB"):
        path = os.environ["EMPLOYEE_DB"]
    else:
        path = _read_config_yaml().get("db_path", DEFAULT_DB_PATH)

    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    Open a SQLite connection in autocommit mode, so every statement is its own
    atomic unit. Rows come back as sqlite3.Row.
    """
    path = db_path or get_db_path()
    conn = sqlite3.connect(
        path,
        check_same_thread=False,
        isolation_level=None,
    )
    try:
        conn.row_factory = sqlite3.Row
        yield conn
    finally:
        conn.close()


def get_db(request: Request) -> Iterator[sqlite3.Connection]:
    """FastAPI dependency: one connection per request to the app's database."""
    with get_conn(request.app.state.db_path) as conn:
        yield conn
