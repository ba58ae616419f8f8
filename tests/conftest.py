from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hrms.config import Settings
from hrms.database import Database
from hrms.exceptions import StorageError
from hrms.main import create_app
from hrms.models.employee import EmployeeModel
from hrms.repositories.employee import get_employee_repository


class InMemoryEmployeeRepository:
    """Dict backed stand-in for EmployeeRepository.

    Operations named in ``failing`` raise StorageError, and every call is
    recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}
        self.failing: set = set()
        self.calls: List[str] = []

    def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failing:
            raise StorageError(f"{operation} failed")

    def seed(self, **fields: Any) -> str:
        oid = ObjectId()
        self.documents[oid] = {"_id": oid, **fields}
        return str(oid)

    async def find_all(self) -> List[EmployeeModel]:
        self._enter("find_all")
        return [EmployeeModel.from_document(doc) for doc in self.documents.values()]

    async def find_by_id(self, oid: ObjectId) -> Optional[EmployeeModel]:
        self._enter("find_by_id")
        doc = self.documents.get(oid)
        return EmployeeModel.from_document(doc) if doc is not None else None

    async def insert_one(self, employee: EmployeeModel) -> str:
        self._enter("insert_one")
        oid = ObjectId()
        self.documents[oid] = {"_id": oid, **employee.to_document()}
        return str(oid)

    async def update_one(self, oid: ObjectId, fields: Dict[str, Any]) -> None:
        self._enter("update_one")
        if oid in self.documents:
            self.documents[oid].update(fields)

    async def delete_one(self, oid: ObjectId) -> int:
        self._enter("delete_one")
        return 1 if self.documents.pop(oid, None) is not None else 0


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables out of Settings."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(Path(__file__).parent)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def repo() -> InMemoryEmployeeRepository:
    """Fresh in-memory employee storage."""
    return InMemoryEmployeeRepository()


@pytest.fixture
def app(settings: Settings, repo: InMemoryEmployeeRepository) -> FastAPI:
    """Application wired to the in-memory repository."""
    app = create_app(settings=settings, database=MagicMock(spec=Database))
    app.dependency_overrides[get_employee_repository] = lambda: repo
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
