from pymediator.core.exceptions import HandlerError


class DomainException(HandlerError):
    """Base exception for all domain errors"""
    pass

class DuplicateItemError(DomainException):
    """Raised when trying to create an item whose name is taken"""
    pass

class OrderNotFoundError(DomainException):
    """Raised when order not found"""
    pass

class CurrencyMismatchError(DomainException):
    """Raised when combining money amounts in different currencies"""
    pass
