"""Custom exception types for the git lead-time calculator."""


class LeadTimeError(Exception):
    """Base exception for all recoverable lead-time calculator errors."""


class ConfigurationError(LeadTimeError):
    """Raised when runtime configuration values are missing or invalid."""


class AuthenticationError(LeadTimeError):
    """Raised when the GitHub token is unavailable."""


class ApiError(LeadTimeError):
    """Raised when a GraphQL request fails or reports errors."""


class NotFoundError(ApiError):
    """Raised when an organization, team or repository is absent from a response."""


class DataValidationError(LeadTimeError):
    """Raised when API payloads do not match the expected shape."""
