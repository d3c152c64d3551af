"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ArticleValidationError(Exception):
    """Raised when an article payload, or the record it would produce, is invalid.

    ``fields`` lists the offending field names so callers can report them.
    """

    def __init__(self, fields: list[str], reason: str = "must be a non-empty string"):
        self.fields = fields
        self.reason = reason
        super().__init__(f"Invalid article: {', '.join(fields)} {reason}")
