from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class EnvironmentRecord:
    """Represents a row from the environments table."""

    id: int
    name: str
    variables: dict[str, str] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None
