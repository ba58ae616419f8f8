# hrms/utils/object_id.py
from bson import ObjectId, errors
from typing import Any

from hrms.exceptions import InvalidId

def parse_object_id(value: Any) -> ObjectId:
    """Validate a 24 character hex string and return it as an ObjectId.

    ``ObjectId`` itself also accepts 12 byte strings and ObjectId instances,
    neither of which is a valid identifier on the wire.
    """
    if not isinstance(value, str) or len(value) != 24:
        raise InvalidId()
    try:
        return ObjectId(value)
    except (errors.InvalidId, TypeError):
        raise InvalidId()
