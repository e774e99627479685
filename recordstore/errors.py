"""Errors raised by the record store."""


class RecordStoreError(Exception):
    """Base for record store failures with a machine-readable code."""
    def __init__(self, message: str, code: str = "record_store_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class MissingIdentifierError(RecordStoreError):
    """Record has no usable string identifier."""
    def __init__(self, message: str):
        super().__init__(message, code="missing_identifier")
