# petsocial/models/lifecycle.py
from enum import Enum


class Lifecycle(Enum):
    """
    Lifecycle state stored on every document in the 'status' field.
    Records are never physically removed; disabling is the delete.
    """
    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"

    @classmethod
    def parse(cls, value) -> "Lifecycle":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.ACTIVE if value else cls.DISABLED
        try:
            return cls(value)
        except ValueError:
            return cls.DISABLED
