# hrms/schemas/employee.py
from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, field_serializer

from hrms.models.employee import EmployeeModel

class EmployeeBase(BaseModel):
    # Missing fields decode to their zero value; unknown keys such as "id" are dropped.
    name: str = ""
    age: float = 0.0
    salary: float = 0.0

    model_config = ConfigDict(extra="ignore")

class EmployeeCreate(EmployeeBase):
    pass

class EmployeeUpdate(EmployeeBase):
    def merge(self, current: EmployeeModel) -> Dict[str, Any]:
        """Combine this partial update with the stored employee.

        A field replaces the stored value only when it is non-empty: a
        non-blank string for ``name``, a non-zero number for ``age`` and
        ``salary``. All three fields are returned so the write sets them
        together.
        """
        return {
            "name": self.name if self.name != "" else current.name,
            "age": self.age if self.age != 0 else current.age,
            "salary": self.salary if self.salary != 0 else current.salary,
        }

class EmployeeOut(EmployeeBase):
    id: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("age", "salary")
    def whole_numbers_as_int(self, value: float) -> Union[int, float]:
        # 36.0 goes out as 36
        if value.is_integer():
            return int(value)
        return value

class EmployeeCreated(BaseModel):
    message: str
    data: EmployeeOut

class MessageResponse(BaseModel):
    message: str
