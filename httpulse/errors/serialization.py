"""Wire shape for NormalizedError at the UI boundary."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from httpulse.errors.category import Category
from httpulse.errors.normalized import NormalizedError


class ErrorPayload(BaseModel):
    """Exactly two string fields: message and category."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    message: str = Field(min_length=1)
    category: Category

    @classmethod
    def from_error(cls, error: NormalizedError) -> "ErrorPayload":
        return cls(message=error.message, category=error.category)

    def to_error(self) -> NormalizedError:
        return NormalizedError(self.message, self.category)


def to_wire(error: NormalizedError) -> dict[str, str]:
    """Render an error as a plain {"message", "category"} dict."""
    return ErrorPayload.from_error(error).model_dump(mode="json")


def to_json(error: NormalizedError) -> str:
    return ErrorPayload.from_error(error).model_dump_json()


def from_wire(data: dict[str, Any]) -> NormalizedError:
    """Rebuild an error from its wire dict.

    Raises:
        pydantic.ValidationError: on missing or extra fields, an empty
            message, or a category outside the fixed set.
    """
    return ErrorPayload.model_validate(data).to_error()


def from_json(raw: str | bytes) -> NormalizedError:
    return ErrorPayload.model_validate_json(raw).to_error()
