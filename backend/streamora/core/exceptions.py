"""Service error taxonomy shared by every engine.

Lookups that miss return None instead of raising; only the failures below
are surfaced to callers.
"""


class ServiceError(Exception):
    """Base exception for service errors."""
    pass


class InputValidationError(ServiceError):
    """A required field is missing or malformed. Nothing was written."""
    pass


class PreconditionNotMetError(ServiceError):
    """An eligibility, threshold or state gate refused the operation."""
    pass


class StorageError(ServiceError):
    """The record store could not persist a write."""
    pass
