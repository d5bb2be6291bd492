"""
Translate raw failures into the gateway's normalized errors.
"""

import json
from typing import Any, Optional, NoReturn

from ..errors import (
    ApiKeyError,
    GenericFailure,
    UnknownFailure,
    is_configuration_error,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)

API_KEY_INVALID_REASON = "API_KEY_INVALID"
API_KEY_ERROR_PHRASES = ("API key not valid", API_KEY_INVALID_REASON)


def _decode_error_envelope(error: BaseException) -> Optional[Any]:
    """
    Return the structured error body, or None when there is none.

    SDK ``APIError`` instances carry the decoded body in ``details``; for
    anything else the message itself may be a JSON document.
    """
    details = getattr(error, "details", None)
    if isinstance(details, dict):
        return details

    try:
        return json.loads(str(error))
    except ValueError:
        return None


def _has_invalid_key_reason(envelope: Any) -> bool:
    if not isinstance(envelope, dict):
        return False

    body = envelope.get("error")
    if not isinstance(body, dict):
        return False

    details = body.get("details")
    if not isinstance(details, list):
        return False

    return any(
        isinstance(detail, dict) and detail.get("reason") == API_KEY_INVALID_REASON
        for detail in details
    )


def is_api_key_error(error: BaseException) -> bool:
    """
    Check whether a failure means the credential was rejected.

    Known phrases in the message win; the structured error body is only
    consulted when neither phrase is present.
    """
    message = str(error)
    if any(phrase in message for phrase in API_KEY_ERROR_PHRASES):
        return True

    return _has_invalid_key_reason(_decode_error_envelope(error))


def classify_error(error: Any, context: str) -> NoReturn:
    """
    Re-raise a caught failure as a normalized gateway error.

    Args:
        error: Whatever was caught around the remote call
        context: Operation label, e.g. "generate image"

    Raises:
        ConfigurationError: unchanged, if ``error`` already is one
        ApiKeyError: the service rejected the credential
        GenericFailure: any other exception
        UnknownFailure: ``error`` is not an exception at all
    """
    if not isinstance(error, BaseException):
        logger.error(f"Error in {context}", error=repr(error))
        raise UnknownFailure(context)

    logger.error(
        f"Error in {context}", error=str(error), error_type=type(error).__name__
    )

    if is_configuration_error(error):
        raise error

    if is_api_key_error(error):
        raise ApiKeyError() from error

    raise GenericFailure(context, str(error)) from error
