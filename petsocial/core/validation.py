# petsocial/core/validation.py
from typing import Any, Dict, List, Optional

from marshmallow import ValidationError as SchemaValidationError

from petsocial.core.errors import ValidationError

EMPTY = "Cannot be empty."


def too_long(limit: int) -> str:
    return f"Up to {limit} characters only."


def too_short(minimum: int) -> str:
    return f"At least {minimum} characters."


class FieldErrors:
    """
    Collects field-level violations for one operation.

    Checks never stop at the first problem; ``raise_if_any`` rejects the whole
    request with every message gathered so far.
    """

    def __init__(self):
        self.messages: List[Dict[str, str]] = []

    def add(self, path: str, message: str):
        self.messages.append({"path": path, "message": message})

    def required(self, path: str, value: Optional[str]) -> bool:
        if not value:
            self.add(path, EMPTY)
            return False
        return True

    def max_length(self, path: str, value: Optional[str], limit: int) -> bool:
        if value and len(value) > limit:
            self.add(path, too_long(limit))
            return False
        return True

    def length(self, path: str, value: Optional[str], minimum: int, maximum: Optional[int] = None,
               required: bool = True) -> bool:
        """Empty check (when required), then lower and upper bounds, reporting only the first that fails."""
        if not value:
            if required:
                self.add(path, EMPTY)
                return False
            return True
        if len(value) < minimum:
            self.add(path, too_short(minimum))
            return False
        if maximum is not None and len(value) > maximum:
            self.add(path, too_long(maximum))
            return False
        return True

    def __bool__(self):
        return bool(self.messages)

    def raise_if_any(self):
        if self.messages:
            raise ValidationError(list(self.messages))


def flatten_schema_errors(err: SchemaValidationError) -> List[Dict[str, str]]:
    """Turns marshmallow's nested ``err.messages`` into ``[{path, message}]``."""
    result: List[Dict[str, str]] = []

    def _walk(prefix: str, value: Any):
        if isinstance(value, dict):
            for key, nested in value.items():
                _walk(f"{prefix}.{key}" if prefix else str(key), nested)
        elif isinstance(value, (list, tuple)):
            for item in value:
                _walk(prefix, item)
        else:
            result.append({"path": prefix or "_schema", "message": str(value)})

    _walk("", err.messages)
    return result
