"""
handlers/error_replies.py
-------------------------
Turns a ServiceError into a short reply that is safe to show a user.
"""

from services.errors import (
    MissingCredentialError,
    NetworkError,
    NotFoundError,
    ServiceError,
    UpstreamError,
)


def describe_service_error(error: ServiceError, subject: str) -> str:
    """
    User-facing text for a failed upstream call.

    Args:
        error: The failure raised by ApiService.
        subject: What was being fetched, e.g. "weather" or "currency".

    Only NotFoundError and UpstreamError expose details; their content
    is either user input or the upstream's own human-readable message.
    """
    if isinstance(error, NotFoundError):
        return f"❌ {error.resource} not found: {error.identifier}"
    if isinstance(error, UpstreamError):
        return f"❌ {error.message}"
    if isinstance(error, MissingCredentialError):
        return f"⚠️ The {subject} service is not configured on this bot."
    if isinstance(error, NetworkError):
        return f"⚠️ Couldn't reach the {subject} service. Try again later."
    return f"❌ Couldn't read {subject} data. Try again later."
