"""
Error taxonomy for data source conversions.

All errors are deterministic input failures; callers should not retry them.
"""


class DataSourceError(Exception):
    """Base class for all data source conversion errors."""
    pass


class UnsupportedSourceTypeError(DataSourceError):
    """Raised when a source type is outside the supported set."""

    def __init__(self, source_type: object):
        self.source_type = source_type
        super().__init__(f"Unsupported data source type: {source_type}")


class MalformedBlobError(DataSourceError):
    """Raised when a stored text blob cannot be parsed into a mapping."""

    def __init__(self, blob: str, reason: str, column: str | None = None):
        self.blob = blob
        self.reason = reason
        self.column = column
        where = f" in column '{column}'" if column else ""
        super().__init__(f"Malformed blob{where}: {reason}")


class MissingSourceOptionError(DataSourceError):
    """Raised in strict mode when flattened options lack schema keys."""

    def __init__(self, source_type: object, missing: list[str]):
        self.source_type = source_type
        self.missing = missing
        super().__init__(
            f"Options for {source_type} are missing required keys: {', '.join(missing)}"
        )
