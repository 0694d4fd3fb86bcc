"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidTransactionDataError(DomainException):
    """Transaction record is malformed or violates the data contract"""

    pass


class InvalidAccountDataError(DomainException):
    """Account record is malformed"""

    pass
