from __future__ import annotations
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict


class FieldType(str, Enum):
    MOBILE = "mobile"
    EMAIL = "email"
    AGE = "age"
    GENDER = "gender"
    AMOUNT = "amount"


ERROR_MESSAGES: Dict[FieldType, str] = {
    FieldType.MOBILE: "Mobile number must be exactly 10 digits",
    FieldType.EMAIL: "Please provide a valid email address in the format example@example.com",
    FieldType.AGE: "Age must be a positive number",
    FieldType.GENDER: "Gender must be Male or Female",
    FieldType.AMOUNT: "Amount must be a positive number",
}

_MOBILE_RE = re.compile(r"[0-9]{10}")
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error_message: str      # fixed per field type, present even when valid

    def to_payload(self) -> Dict[str, Any]:
        return {"isValid": self.is_valid, "errorMessage": self.error_message}


def _to_number(v: Any) -> float | None:
    if isinstance(v, bool):
        return None
    try:
        n = float(str(v).strip())
    except (TypeError, ValueError):
        return None
    return None if math.isnan(n) else n


def is_valid_mobile(v: Any) -> bool:
    return _MOBILE_RE.fullmatch(str(v)) is not None


def is_valid_email(v: Any) -> bool:
    return _EMAIL_RE.fullmatch(str(v)) is not None


def is_valid_age(v: Any) -> bool:
    n = _to_number(v)
    return n is not None and 0 < n < 120


def is_valid_gender(v: Any) -> bool:
    return str(v).lower() in ("male", "female")


def is_valid_amount(v: Any) -> bool:
    n = _to_number(v)
    return n is not None and math.isfinite(n) and n > 0


_RULES: Dict[FieldType, Callable[[Any], bool]] = {
    FieldType.MOBILE: is_valid_mobile,
    FieldType.EMAIL: is_valid_email,
    FieldType.AGE: is_valid_age,
    FieldType.GENDER: is_valid_gender,
    FieldType.AMOUNT: is_valid_amount,
}


def validate_field(field_type: FieldType | str, value: Any) -> ValidationResult:
    """
    Check one collected field. Never raises: an unknown field type is reported
    as invalid so the caller can re-prompt.
    """
    try:
        ft = field_type if isinstance(field_type, FieldType) else FieldType(str(field_type).strip().lower())
    except ValueError:
        return ValidationResult(False, f"Unsupported field type: {field_type}")
    return ValidationResult(_RULES[ft](value), ERROR_MESSAGES[ft])
