"""
Run the employee REST API.

  python -m employee_api [--db-path employees.db] [--bind-rest :8080]

Both options fall back to EMPLOYEE_DB / EMPLOYEE_BIND_REST, then to the defaults.
"""
from __future__ import annotations

import argparse
import logging
import os

import uvicorn

from .api import create_app
from .db import DEFAULT_DB_PATH

DEFAULT_BIND_REST = ":8080"


def parse_bind(bind: str) -> tuple[str, int]:
    """':8080' -> ('0.0.0.0', 8080); 'localhost:9000' -> ('localhost', 9000)."""
    host, sep, port = bind.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid bind address: {bind!r}")
    return host or "0.0.0.0", int(port)


def main(argv=None):
    ap = argparse.ArgumentParser(prog="employee_api", description="Employee records REST API")
    ap.add_argument("--db-path", default=os.environ.get("EMPLOYEE_DB") or DEFAULT_DB_PATH)
    ap.add_argument("--bind-rest", default=os.environ.get("EMPLOYEE_BIND_REST") or DEFAULT_BIND_REST)
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        host, port = parse_bind(args.bind_rest)
    except ValueError as e:
        ap.error(str(e))

    logging.getLogger(__name__).info("starting REST API server on %s", args.bind_rest)
    uvicorn.run(create_app(args.db_path), host=host, port=port)


if __name__ == "__main__":
    main()
