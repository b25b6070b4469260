from __future__ import annotations

from sqlite3 import Connection, Row
from typing import Optional

from ..domain.employee import Employee, PaginationParams, ts_to_datetime

_COLUMNS = "id, name, position, salary, date_created"


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS employees (
            id            INTEGER PRIMARY KEY AUTOINCREMENT,
            name          TEXT,
            position      TEXT,
            salary        NUMERIC,
            date_created  INTEGER
        )
        """
    )


def from_row(row: Row) -> Employee:
    # positional: id, name, position, salary, date_created
    return Employee(
        id=int(row[0]),
        name=row[1],
        position=row[2],
        salary=float(row[3]),
        date_created=ts_to_datetime(row[4]),
    )


def insert_employee(conn: Connection, name: str, position: str, salary: float, created_ts: int) -> int:
    cur = conn.execute(
        "INSERT INTO employees(name, position, salary, date_created) VALUES(?,?,?,?)",
        (name, position, salary, created_ts),
    )
    return int(cur.lastrowid)


def get_employee(conn: Connection, emp_id: int) -> Optional[Employee]:
    row = conn.execute(
        f"SELECT {_COLUMNS} FROM employees WHERE id=?",
        (emp_id,),
    ).fetchone()
    return from_row(row) if row else None


def update_employee(conn: Connection, emp: Employee, created_ts: int) -> int:
    cur = conn.execute(
        "UPDATE employees SET name=?, position=?, salary=?, date_created=? WHERE id=?",
        (emp.name, emp.position, emp.salary, created_ts, emp.id),
    )
    return cur.rowcount


def delete_employee(conn: Connection, emp_id: int) -> int:
    cur = conn.execute("DELETE FROM employees WHERE id=?", (emp_id,))
    return cur.rowcount


def list_employee_page(conn: Connection, params: PaginationParams) -> list[Employee]:
    rows = conn.execute(
        f"SELECT {_COLUMNS} FROM employees ORDER BY id ASC LIMIT ? OFFSET ?",
        (params.count, params.offset),
    ).fetchall()
    return [from_row(r) for r in rows]


def count_all(conn: Connection) -> int:
    return int(conn.execute("SELECT COUNT(1) AS c FROM employees").fetchone()["c"])
