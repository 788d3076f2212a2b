class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class IncompleteSessionError(ValidationError):
    """Raised when a session is finalized without teacher, subject or timeslot."""


class UnknownPupilError(ValidationError):
    """Raised when a pupil id does not exist in the roster."""


class UnknownTeacherError(ValidationError):
    """Raised when a teacher id does not exist in the roster."""


class RosterDataError(ValidationError):
    """Raised at startup when the static roster data is malformed."""


class PersistenceError(DomainError):
    """Raised when the report history cannot be read or written."""


class ReportFormatError(PersistenceError):
    """Raised when a stored history blob does not have the expected shape."""


class CloudSyncError(DomainError):
    """Raised when a report could not be submitted to the remote sheet."""
