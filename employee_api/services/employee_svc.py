"""
Employee record store.

Every function takes the connection explicitly; the caller owns its lifetime.
sqlite3 failures surface as StorageError, bad input as ValidationError, and a
missing row as None (never an error).
"""
from __future__ import annotations

import logging
import sqlite3
import time
from contextlib import contextmanager
from sqlite3 import Connection
from typing import Iterator, Optional

from ..domain.employee import Employee, PaginationParams, storable_ts
from ..domain.errors import StorageError, ValidationError
from ..repository import employee_repo

logger = logging.getLogger(__name__)


@contextmanager
def _storage(op: str) -> Iterator[None]:
    try:
        yield
    except (sqlite3.Error, OverflowError) as e:
        logger.error("employee store %s failed: %s", op, e)
        raise StorageError(str(e)) from e


def ensure_employee_schema(conn: Connection):
    employee_repo.ensure_schema(conn)


def create(conn: Connection, emp: Employee) -> int:
    """Insert name/position/salary; id and date_created are assigned here."""
    with _storage("create"):
        emp_id = employee_repo.insert_employee(
            conn, emp.name, emp.position, emp.salary, int(time.time())
        )
    logger.info("created employee %s", emp_id)
    return emp_id


def get(conn: Connection, emp_id: int) -> Optional[Employee]:
    with _storage("get"):
        return employee_repo.get_employee(conn, emp_id)


def update(conn: Connection, emp: Employee) -> None:
    if emp.date_created is None:
        raise ValidationError("date_created is required for update")
    created_ts = storable_ts(emp.date_created)
    with _storage("update"):
        matched = employee_repo.update_employee(conn, emp, created_ts)
    if not matched:
        logger.info("update matched no employee with id %s", emp.id)


def delete(conn: Connection, emp_id: int) -> None:
    with _storage("delete"):
        employee_repo.delete_employee(conn, emp_id)


def list_page(conn: Connection, params: PaginationParams) -> list[Employee]:
    """
    One page in ascending id order: LIMIT count OFFSET (page-1)*count.

    The window is offset based, so a delete or insert between two page fetches
    shifts every later page.
    """
    params.validate()
    with _storage("list_page"):
        return employee_repo.list_employee_page(conn, params)


def count(conn: Connection) -> int:
    with _storage("count"):
        return employee_repo.count_all(conn)
