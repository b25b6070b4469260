import os
import sys
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture()
def tmp_db_path(tmp_path, monkeypatch):
    path = tmp_path / "employees_test.db"
    monkeypatch.setenv("EMPLOYEE_DB", str(path))
    from employee_api.api import ensure_schemas
    ensure_schemas(str(path))
    return str(path)


@pytest.fixture()
def conn(tmp_db_path):
    from employee_api.db import get_conn
    with get_conn(tmp_db_path) as c:
        yield c


@pytest.fixture()
def client(tmp_db_path):
    from fastapi.testclient import TestClient
    from employee_api.api import create_app
    with TestClient(create_app(tmp_db_path)) as c:
        yield c
