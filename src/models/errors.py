"""Exception classes for the product table."""


class MissingReferenceError(LookupError):
    """Raised when a product or category points at a record that does not exist.

    Examples:
        - a product whose ``categoryId`` matches no category
        - a category whose ``ownerId`` matches no user
    """

    def __init__(self, kind: str, record_id: int, missing_kind: str, missing_id: int):
        self.kind = kind
        self.record_id = record_id
        self.missing_kind = missing_kind
        self.missing_id = missing_id
        super().__init__(
            f"{kind} {record_id} references missing {missing_kind} {missing_id}"
        )


class DataLoadError(Exception):
    """Raised when a fixture file cannot be read, parsed, or mapped to models."""
    pass
