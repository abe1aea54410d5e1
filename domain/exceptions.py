"""Domain Exceptions"""


class DomainException(Exception):
    """Raised when a reservation business rule is violated"""
