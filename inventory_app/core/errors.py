class InventoryAppError(Exception):
    """Base class for errors the HTTP layer knows how to render."""


class DuplicateUsername(InventoryAppError):
    pass


class InvalidCredentials(InventoryAppError):
    pass


class NotFound(InventoryAppError):
    pass


class Forbidden(InventoryAppError):
    pass


class NotAuthenticated(InventoryAppError):
    pass


class StorageFailure(InventoryAppError):
    """Reading or writing the data file failed (I/O, bad JSON, lock timeout)."""
