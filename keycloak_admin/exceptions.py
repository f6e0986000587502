"""Keycloak-specific exceptions for error handling."""


class KeycloakError(Exception):
    """Base exception for all Keycloak operations."""
    pass


class KeycloakAPIError(KeycloakError):
    """HTTP error from Keycloak Admin API.

    Attributes:
        status_code: HTTP status code
        message: Error message from response
        endpoint: API endpoint that failed
    """

    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")


class NotFoundError(KeycloakAPIError):
    """Resource does not exist (HTTP 404)."""
    pass


class ConflictError(KeycloakAPIError):
    """Resource already exists or conflicts with server state (HTTP 409)."""
    pass


class AuthenticationError(KeycloakAPIError):
    """Token endpoint refused the configured credentials."""
    pass


class EmptyCollectionError(KeycloakError, LookupError):
    """first() was called on a collection without elements."""
    pass


class ConfigurationError(KeycloakError, ValueError):
    """Required connection setting is missing or malformed."""
    pass


def error_for_status(status_code: int, message: str, endpoint: str) -> KeycloakAPIError:
    """Build the most specific API error for an HTTP status code."""
    if status_code == 404:
        return NotFoundError(status_code, message, endpoint)
    if status_code == 409:
        return ConflictError(status_code, message, endpoint)
    return KeycloakAPIError(status_code, message, endpoint)
