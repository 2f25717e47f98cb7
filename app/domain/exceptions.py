"""Errors raised by the domain and application layers."""


class ValidationError(ValueError):
    """Raised when a notification request carries invalid input."""


__all__ = ["ValidationError"]
