"""Exceptions raised by storefront adapters.

Field-level validation problems never surface as exceptions: the checkout form
keeps them as per-field messages. Value-object validation uses protean's
``ValidationError``.
"""


class StorageError(Exception):
    """A durable store adapter could not read or write a value."""


class RemoteCallError(Exception):
    """The remote catalog/order database rejected or failed a call."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
