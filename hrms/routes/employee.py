# hrms/routes/employee.py
import logging
from typing import List
from fastapi import APIRouter, Depends
from hrms.exceptions import NotFound, QueryFailed, StorageError, WriteFailed
from hrms.models.employee import EmployeeModel
from hrms.repositories.employee import EmployeeRepository, get_employee_repository
from hrms.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, EmployeeCreated, MessageResponse
from hrms.utils.object_id import parse_object_id

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/employees", response_model=List[EmployeeOut], response_model_exclude_none=True)
async def get_employees(repo: EmployeeRepository = Depends(get_employee_repository)):
    try:
        employees = await repo.find_all()
    except StorageError:
        raise QueryFailed()
    return [EmployeeOut(**employee.model_dump()) for employee in employees]

@router.get("/employee/{employee_id}", response_model=EmployeeOut, response_model_exclude_none=True)
async def get_employee(employee_id: str, repo: EmployeeRepository = Depends(get_employee_repository)):
    employee_oid = parse_object_id(employee_id)

    # A failed lookup is reported the same way as a missing document
    try:
        employee = await repo.find_by_id(employee_oid)
    except StorageError:
        raise NotFound()
    if employee is None:
        raise NotFound()

    return EmployeeOut(**employee.model_dump())

@router.post(
    "/employee",
    status_code=201,
    response_model=EmployeeCreated,
    response_model_exclude_none=True,
)
async def create_employee(employee: EmployeeCreate, repo: EmployeeRepository = Depends(get_employee_repository)):
    try:
        employee_id = await repo.insert_one(EmployeeModel(**employee.model_dump()))
    except StorageError:
        raise WriteFailed("error creating employee")

    logger.info("Created employee %s", employee_id)
    # The body is echoed back as received, without the assigned id
    return EmployeeCreated(message="employee created", data=EmployeeOut(**employee.model_dump()))

@router.put("/employee/{employee_id}", response_model=MessageResponse)
async def update_employee(
    employee_id: str,
    employee: EmployeeUpdate,
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    employee_oid = parse_object_id(employee_id)

    # Not atomic: a concurrent write between this read and the update below is overwritten
    try:
        current = await repo.find_by_id(employee_oid)
    except StorageError:
        raise NotFound()
    if current is None:
        raise NotFound()

    try:
        await repo.update_one(employee_oid, employee.merge(current))
    except StorageError:
        raise WriteFailed("error updating employee")

    return MessageResponse(message="employee updated")

@router.delete("/employee/{employee_id}", response_model=MessageResponse)
async def delete_employee(employee_id: str, repo: EmployeeRepository = Depends(get_employee_repository)):
    employee_oid = parse_object_id(employee_id)

    try:
        deleted = await repo.delete_one(employee_oid)
    except StorageError:
        raise WriteFailed("error deleting employee")

    if deleted == 0:
        logger.info("Delete of employee %s matched no document", employee_id)
    return MessageResponse(message="employee deleted")
