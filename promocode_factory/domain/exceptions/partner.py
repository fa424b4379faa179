"""Partner-related domain exceptions."""

from .base import DomainException, ErrorKind


class PartnerNotFoundException(DomainException):
    """Raised when a partner cannot be found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, partner_id: str):
        super().__init__(
            message="partner not found",
            code="PARTNER_NOT_FOUND",
        )
        self.partner_id = partner_id


class PartnerNotActiveException(DomainException):
    """Raised when a limit change is attempted on an inactive partner."""

    kind = ErrorKind.INVALID_STATE

    def __init__(self, partner_id: str):
        super().__init__(
            message="partner not active",
            code="PARTNER_NOT_ACTIVE",
        )
        self.partner_id = partner_id


class InvalidLimitException(DomainException):
    """Raised when a requested limit is not a positive number."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, limit: int):
        super().__init__(
            message="limit must be greater than 0",
            code="INVALID_LIMIT",
        )
        self.limit = limit


class PartnerLimitNotFoundException(DomainException):
    """Raised when a partner has no limit with the given ID."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, partner_id: str, limit_id: str):
        super().__init__(
            message=f"Limit not found: {limit_id}",
            code="PARTNER_LIMIT_NOT_FOUND",
        )
        self.partner_id = partner_id
        self.limit_id = limit_id


class ActiveLimitNotFoundException(DomainException):
    """Raised when cancelling a limit but the partner has none active."""

    kind = ErrorKind.INVALID_STATE

    def __init__(self, partner_id: str):
        super().__init__(
            message="partner has no active limit",
            code="ACTIVE_LIMIT_NOT_FOUND",
        )
        self.partner_id = partner_id
