"""
Pydantic schemas for employee records.

Decoding follows the service wire format: missing or null fields keep their
zero value, unknown fields are ignored, keys match field names without regard
to case, and values must already have the right JSON type. Identifiers are
64-bit signed integers and salaries must be finite.
"""
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from employee_service.utils.params import INT64_MAX, INT64_MIN

_json_decoder = json.JSONDecoder()


class Employee(BaseModel):
    id: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    name: str = ""
    position: str = ""
    salary: float = 0.0

    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        fields = {name.lower(): name for name in cls.model_fields}
        exact = {}
        folded = {}
        for key, value in data.items():
            if not isinstance(key, str) or value is None:
                continue
            if key in cls.model_fields:
                exact[key] = value
            elif key.lower() in fields:
                folded[fields[key.lower()]] = value
        # An exact key wins over a case-folded one.
        return {**folded, **exact}


def decode_employee(body: bytes) -> Employee:
    """Decode the first JSON value in ``body`` into an Employee.

    Bytes after that value are ignored and a bare ``null`` yields a zero
    Employee. Raises ValueError (pydantic's ValidationError included) for
    anything that is not valid UTF-8 JSON of the right shape.
    """
    text = body.decode("utf-8").lstrip(" \t\r\n")
    _, end = _json_decoder.raw_decode(text)
    first = text[:end]
    if first == "null":
        return Employee()
    return Employee.model_validate_json(first)
