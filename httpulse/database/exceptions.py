class PersistenceError(Exception):
    """Base exception for repository-level persistence failures."""


class RecordNotFoundError(PersistenceError):
    """Raised when a requested row does not exist."""
