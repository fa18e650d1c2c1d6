"""Custom exceptions and helpers for consistent error responses."""

import json
from http import HTTPStatus
from typing import Any, Dict


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(AppError):
    """Raised when the request body cannot be parsed."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=422)


class MethodNotAllowedError(AppError):
    """Raised for any HTTP method other than GET."""

    def __init__(self, method: str = ""):
        super().__init__(f"Method {method or '<none>'} not allowed", status_code=405)


class NotFoundError(AppError):
    """Raised when a requested resource is missing."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class StoreError(AppError):
    """Raised when DynamoDB cannot be configured, reached or queried."""

    def __init__(self, message: str = "Profile store unavailable"):
        super().__init__(message, status_code=500)


def status_response(status_code: int) -> Dict[str, Any]:
    """Plain-text response whose body is the standard status phrase."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "text/plain"},
        "body": HTTPStatus(status_code).phrase,
    }


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into an API Gateway response without leaking detail."""
    return status_response(error.status_code)


def json_response(status_code: int, body: Any) -> Dict[str, Any]:
    """Format a JSON API Gateway HTTP API response; str bodies are sent as-is."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": body if isinstance(body, str) else json.dumps(body),
    }
