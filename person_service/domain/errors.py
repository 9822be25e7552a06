class StorageError(Exception):
    """Base class for failures raised by the persistence gateway."""


class ConnectivityError(StorageError):
    """The database could not be reached."""


class ConstraintViolation(StorageError):
    """The database rejected the row (integrity or data error)."""
