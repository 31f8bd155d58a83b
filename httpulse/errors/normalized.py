from httpulse.errors.category import Category


class NormalizedError(Exception):
    """Uniform failure raised by every subsystem call site.

    Carries only the original error's display text and the category of the
    subsystem it came from. Both fields are read-only.
    """

    def __init__(self, message: str, category: Category | str) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError("NormalizedError message must be a non-empty string")
        if not isinstance(category, Category):
            category = Category.parse(category)
        super().__init__(message)
        self._message = message
        self._category = category

    @property
    def message(self) -> str:
        return self._message

    @property
    def category(self) -> Category:
        return self._category

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"NormalizedError(message={self._message!r}, category={self._category.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalizedError):
            return NotImplemented
        return self._message == other._message and self._category is other._category

    def __hash__(self) -> int:
        return hash((self._message, self._category))

    def __reduce__(self) -> tuple[type["NormalizedError"], tuple[str, str]]:
        return (self.__class__, (self._message, self._category.value))
