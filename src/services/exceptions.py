"""
Service-level exceptions.

This module contains exceptions that can be raised by various services
and handlers in the application.
"""

class InsightsError(Exception):
    """Base exception for the insights service."""
    pass

class InputValidationError(InsightsError):
    """Raised when a request body is malformed or lacks a required field."""
    pass

class UpstreamUnavailableError(InsightsError):
    """Raised when the data store cannot persist generated insights."""
    pass
