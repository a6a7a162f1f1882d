"""Root of the scoring domain's exception hierarchy."""


class DomainException(Exception):
    """A scoring rule was violated. Subclasses set ``default_message``."""

    default_message = "Scoring domain error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
