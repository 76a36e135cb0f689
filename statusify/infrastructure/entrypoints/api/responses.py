import logging
from http import HTTPStatus
from typing import Any

from fastapi import Response
from fastapi.responses import RedirectResponse

from pydantic_core import PydanticSerializationError
from pydantic_core import to_json

from statusify.domain.entities.auth import Carrier
from statusify.domain.errors import ErrorCatalog
from statusify.domain.exceptions import StatusifyError
from statusify.infrastructure.config.settings.app import app_settings
from statusify.infrastructure.entrypoints.api.schemas import ErrorResponse

logger = logging.getLogger(__name__)


class ResponseSerializationError(RuntimeError):
    """An internal payload could not be serialized: this is a programming error."""


def write_response(payload: Any, status_code: int) -> Response:
    """Serializes a payload as the JSON body of a response with the given status.

    The body is rendered before the response exists, so status and content type
    are always set along with it.

    Raises:
        ResponseSerializationError: If the payload cannot be serialized. It is
            never caught by the handlers.
    """
    try:
        body = to_json(payload)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        logger.critical("Unable to serialize response payload of type %s", type(payload).__name__)
        raise ResponseSerializationError(f"Unable to serialize {type(payload).__name__}") from e

    return Response(content=body, status_code=status_code, media_type="application/json")


def write_error(error: ErrorCatalog) -> Response:
    return write_response(ErrorResponse(code=error.code, message=error.message), error.status)


def redirect_with_carriers(url: str, carriers: list[Carrier]) -> RedirectResponse:
    response = RedirectResponse(url, status_code=HTTPStatus.SEE_OTHER)

    for carrier in carriers:
        response.set_cookie(
            key=carrier.name,
            value=carrier.value,
            expires=carrier.expires_at,
            path="/",
            secure=app_settings.COOKIE_SECURE,
            httponly=True,
            samesite="lax",
        )

    return response


def write_exception(exc: StatusifyError, context: str) -> Response:
    """Logs a failure with its chained cause, then writes its catalog entry."""
    level = logging.ERROR if exc.error.status >= HTTPStatus.INTERNAL_SERVER_ERROR else logging.WARNING
    logger.log(level, "%s failed with '%s': %s", context, exc.error.code, exc, exc_info=exc)

    return write_error(exc.error)
