"""Handler for GET /profile."""

from typing import Optional

from pydantic_core import PydanticSerializationError

from models.profile import ProfileRequest
from utils.error_handling import AppError, NotFoundError, json_response, status_response, to_response
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Lazy-loaded service so the DynamoDB resource is built once per warm container
_profile_service: Optional["ProfileService"] = None


def _get_profile_service():
    """Lazy-load ProfileService."""
    global _profile_service
    if _profile_service is None:
        from services.profile_service import ProfileService
        _profile_service = ProfileService()
    return _profile_service


def get_profile(request: ProfileRequest):
    """Fetch one profile and shape the HTTP response."""
    try:
        profile = _get_profile_service().get_profile(request)
        if profile is None:
            raise NotFoundError(f"No profile for {request.pk}/{request.sk}")
    except AppError as exc:
        if exc.status_code >= 500:
            logger.error("Profile lookup failed", extra={"error": str(exc)})
        return to_response(exc)

    try:
        body = profile.to_json()
    except PydanticSerializationError as exc:
        logger.error("Couldn't serialize profile", extra={"error": str(exc)})
        return status_response(500)

    return json_response(200, body)


def lambda_handler(event, context):
    """Parse the request from the event and return the profile."""
    try:
        request = ProfileRequest.from_event(event)
    except AppError as exc:
        logger.warning("Rejected request", extra={"error": str(exc)})
        return to_response(exc)
    return get_profile(request)
