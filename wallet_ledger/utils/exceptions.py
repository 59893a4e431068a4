class ServiceError(Exception):
    http_status = 400

    def __init__(self, code="SERVICE_ERROR", message="Service error", details=None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFound(ServiceError):
    """A referenced participant, wallet, internal account or transaction does not exist."""

    http_status = 404

    def __init__(self, message="Resource not found", details=None):
        super().__init__(code="NOT_FOUND", message=message, details=details)


class Forbidden(ServiceError):
    """The caller has no standing over the target transaction."""

    http_status = 403

    def __init__(self, message="Not allowed", details=None):
        super().__init__(code="FORBIDDEN", message=message, details=details)


class IntegrityViolation(NotFound):
    """
    A participant points at a wallet or internal account that does not exist.
    This is corrupted data, never a user error.
    """

    http_status = 500

    def __init__(self, message="Dangling participant reference", details=None):
        super().__init__(message=message, details=details)
        self.code = "INTEGRITY_VIOLATION"


class Transient(ServiceError):
    """Storage connectivity or timeout failure. Safe for the caller to retry."""

    http_status = 503

    def __init__(self, message="Storage temporarily unavailable", details=None):
        super().__init__(code="STORAGE_UNAVAILABLE", message=message, details=details)
