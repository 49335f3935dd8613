"""Shared exceptions for service layer operations."""


class PromptNotFoundError(Exception):
    """Raised when a mutation targets an id absent from the custom prompt store."""

    def __init__(self, prompt_id: str) -> None:
        self.prompt_id = prompt_id
        super().__init__(f"Prompt not found: {prompt_id}")


class MissingFieldsError(Exception):
    """Raised when a create request lacks one or more required fields."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Missing required fields: {', '.join(fields)}")


class CuratedSourceError(Exception):
    """
    Raised when the curated CSV source cannot be read or parsed.

    Fatal for the request that triggered it; the other stores self-heal
    instead of raising.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class StoreWriteError(Exception):
    """Raised when persisting a store file fails and strict writes are enabled."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")
