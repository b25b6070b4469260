from __future__ import annotations

import logging
from datetime import datetime
from sqlite3 import Connection
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field

from ..db import get_db
from ..domain.employee import Employee, PaginationParams, ZERO_EMPLOYEE, INT64_MIN, INT64_MAX
from ..responses import ok_response
from ..services import employee_svc

logger = logging.getLogger(__name__)

router = APIRouter()

_METHODS = {"GET", "POST", "PUT", "DELETE", "PATCH"}

# SQLite binds integers as signed 64-bit
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class EmployeeBody(BaseModel):
    id: Int64 = 0
    name: str = ""
    position: str = ""
    salary: float = 0.0
    date_created: Optional[datetime] = None

    def to_employee(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.name,
            position=self.position,
            salary=self.salary,
            date_created=self.date_created,
        )


class EmployeeIdBody(BaseModel):
    id: Int64 = 0


class PageBody(BaseModel):
    page: Int64 = 0
    count: Int64 = 0


def _or_zero(emp: Optional[Employee]) -> dict:
    return (emp or ZERO_EMPLOYEE).to_dict()


@router.post("/employee/create")
def api_employee_create(body: Optional[EmployeeBody] = None, conn: Connection = Depends(get_db)):
    body = body or EmployeeBody()
    emp_id = employee_svc.create(conn, body.to_employee())
    logger.info("REST CreateEmployee: %s", emp_id)
    return ok_response(_or_zero(employee_svc.get(conn, emp_id)))


@router.get("/employee/get")
def api_employee_get(body: Optional[EmployeeIdBody] = None, conn: Connection = Depends(get_db)):
    body = body or EmployeeIdBody()
    logger.info("REST GetEmployee: %s", body.id)
    return ok_response(_or_zero(employee_svc.get(conn, body.id)))


@router.get("/employee/get_batch")
def api_employee_get_batch(body: Optional[PageBody] = None, conn: Connection = Depends(get_db)):
    body = body or PageBody()
    logger.info("REST GetEmployeesBatch: page=%s count=%s", body.page, body.count)
    emps = employee_svc.list_page(conn, PaginationParams(page=body.page, count=body.count))
    return ok_response([e.to_dict() for e in emps])


@router.put("/employee/update")
def api_employee_update(body: Optional[EmployeeBody] = None, conn: Connection = Depends(get_db)):
    body = body or EmployeeBody()
    logger.info("REST UpdateEmployee: %s", body.id)
    employee_svc.update(conn, body.to_employee())
    return ok_response(_or_zero(employee_svc.get(conn, body.id)))


@router.delete("/employee/delete")
def api_employee_delete(body: Optional[EmployeeIdBody] = None, conn: Connection = Depends(get_db)):
    body = body or EmployeeIdBody()
    logger.info("REST DeleteEmployee: %s", body.id)
    employee_svc.delete(conn, body.id)
    return ok_response(None)


def _noop():
    return Response(status_code=200)


# Other verbs on these paths do nothing and answer 200 with an empty body.
for _path, _method in (
    ("/employee/create", "POST"),
    ("/employee/get", "GET"),
    ("/employee/get_batch", "GET"),
    ("/employee/update", "PUT"),
    ("/employee/delete", "DELETE"),
):
    router.add_api_route(_path, _noop, methods=sorted(_METHODS - {_method}), include_in_schema=False)
