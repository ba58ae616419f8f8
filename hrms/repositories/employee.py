# hrms/repositories/employee.py
import asyncio
import logging
from typing import Any, Awaitable, Dict, List, Optional

from bson import ObjectId
from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from hrms.database import Database, get_database
from hrms.exceptions import StorageError
from hrms.models.employee import EmployeeModel

logger = logging.getLogger(__name__)

class EmployeeRepository:
    """Employee operations on one collection.

    Every call is bounded by its own ``timeout``. Driver errors, expired
    deadlines and documents that do not decode all surface as ``StorageError``.
    """

    def __init__(self, collection: AsyncIOMotorCollection, timeout: float = 10.0):
        self.collection = collection
        self.timeout = timeout

    async def _bounded(self, operation: str, awaitable: Awaitable[Any]) -> Any:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.warning("%s on %s timed out after %ss", operation, self.collection.name, self.timeout)
            raise StorageError(f"{operation} timed out") from e
        except PyMongoError as e:
            logger.warning("%s on %s failed: %s", operation, self.collection.name, e)
            raise StorageError(f"{operation} failed") from e

    def _decode(self, document: Dict[str, Any]) -> EmployeeModel:
        try:
            return EmployeeModel.from_document(document)
        except ValidationError as e:
            logger.warning("Undecodable document %s in %s: %s", document.get("_id"), self.collection.name, e)
            raise StorageError("document does not decode as an employee") from e

    async def find_all(self) -> List[EmployeeModel]:
        documents = await self._bounded("find", self.collection.find({}).to_list(length=None))
        return [self._decode(document) for document in documents]

    async def find_by_id(self, oid: ObjectId) -> Optional[EmployeeModel]:
        document = await self._bounded("find_one", self.collection.find_one({"_id": oid}))
        if document is None:
            return None
        return self._decode(document)

    async def insert_one(self, employee: EmployeeModel) -> str:
        result = await self._bounded("insert_one", self.collection.insert_one(employee.to_document()))
        return str(result.inserted_id)

    async def update_one(self, oid: ObjectId, fields: Dict[str, Any]) -> None:
        await self._bounded("update_one", self.collection.update_one({"_id": oid}, {"$set": fields}))

    async def delete_one(self, oid: ObjectId) -> int:
        result = await self._bounded("delete_one", self.collection.delete_one({"_id": oid}))
        return result.deleted_count

async def get_employee_repository(
    request: Request, database: Database = Depends(get_database)
) -> EmployeeRepository:
    settings = request.app.state.settings
    return EmployeeRepository(
        database.collection(settings.EMPLOYEE_COLLECTION),
        timeout=settings.OPERATION_TIMEOUT,
    )
