from httpulse.errors.category import Category
from httpulse.errors.dispatcher import RECOGNIZED_TYPES, category_for, normalize, subsystem_call
from httpulse.errors.normalized import NormalizedError
from httpulse.errors.serialization import ErrorPayload, from_json, from_wire, to_json, to_wire

__all__ = [
    "RECOGNIZED_TYPES",
    "Category",
    "ErrorPayload",
    "NormalizedError",
    "category_for",
    "from_json",
    "from_wire",
    "normalize",
    "subsystem_call",
    "to_json",
    "to_wire",
]
