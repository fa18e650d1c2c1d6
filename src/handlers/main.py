"""
Single entrypoint Lambda for the foodie bucks profile API.

API Gateway hands every method to one function, so the router switches on
the HTTP method and only GET reaches the profile handler.
"""

from typing import Callable, Dict

from . import profile
from utils.error_handling import MethodNotAllowedError, status_response, to_response
from utils.logging_config import get_logger

logger = get_logger(__name__)


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    Any method other than GET gets 405 whatever the body holds. Failures
    never escape this function; unexpected ones become a bare 500.
    """
    method = (event.get("requestContext", {}).get("http", {}).get("method") or "").upper()

    method_table: Dict[str, Callable] = {
        "GET": profile.lambda_handler,
    }

    handler = method_table.get(method)
    if handler is None:
        return to_response(MethodNotAllowedError(method))

    try:
        return handler(event, context)
    except Exception:
        logger.exception("Unhandled error", extra={"method": method})
        return status_response(500)
