# hrms/models/employee.py
from typing import Any, Dict, Optional
from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

class EmployeeModel(BaseModel):
    """An employee document as stored in the ``employee`` collection."""

    id: Optional[str] = Field(default=None, alias="_id")
    name: str = ""
    age: float = 0.0
    salary: float = 0.0

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        return value

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "EmployeeModel":
        return cls.model_validate(document)

    def to_document(self) -> Dict[str, Any]:
        """Fields to persist; ``_id`` is left to the database."""
        return self.model_dump(exclude={"id"})
