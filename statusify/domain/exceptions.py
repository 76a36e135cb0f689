from typing import ClassVar

from statusify.domain.errors import ErrorCatalog


class StatusifyError(Exception):
    """Base class of the failures reported to the caller of a linking hop."""

    error: ClassVar[ErrorCatalog]


class CarrierMissingError(StatusifyError):
    """Raised when a session carrier is absent from the second hop."""

    error = ErrorCatalog.INVALID_CARRIER


class CarrierInvalidError(StatusifyError):
    """Raised when a session carrier cannot be verified (tampered or expired)."""

    error = ErrorCatalog.INVALID_CARRIER


class ChatExchangeCodeError(StatusifyError):
    """Raised when Slack answers but refuses the authorization code."""

    error = ErrorCatalog.INVALID_CHAT_AUTH_CODE


class ChatAuthRequestError(StatusifyError):
    """Raised when Slack's token endpoint cannot be reached or answers garbage."""

    error = ErrorCatalog.CHAT_AUTH_BAD_REQUEST


class ProviderExchangeCodeError(StatusifyError):
    error = ErrorCatalog.INVALID_MUSIC_AUTH_CODE


class ProviderStateMismatchError(ProviderExchangeCodeError):
    pass


class UserLinkStoreError(StatusifyError):
    error = ErrorCatalog.ADD_USER_ERROR
