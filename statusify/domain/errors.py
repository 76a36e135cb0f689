from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus


@dataclass(frozen=True, kw_only=True)
class ErrorEntry:
    """A named failure condition as reported to the HTTP caller."""

    code: str
    message: str
    status: HTTPStatus


class ErrorCatalog(Enum):
    """The fixed vocabulary of failures the linking flow may report.

    Every handler reports its failures through one of these entries, so the
    caller always receives a stable machine-readable code with a matching
    HTTP status. Entries are bound once, at definition time.
    """

    INVALID_CARRIER = ErrorEntry(
        code="invalid_cookie",
        message="Slack session cookies are missing or invalid, please restart the installation",
        status=HTTPStatus.BAD_REQUEST,
    )
    INVALID_CHAT_AUTH_CODE = ErrorEntry(
        code="invalid_slack_auth_code",
        message="Slack refused the authorization code",
        status=HTTPStatus.BAD_REQUEST,
    )
    CHAT_AUTH_BAD_REQUEST = ErrorEntry(
        code="slack_auth_bad_request",
        message="Unable to exchange the authorization code with Slack",
        status=HTTPStatus.BAD_GATEWAY,
    )
    INVALID_MUSIC_AUTH_CODE = ErrorEntry(
        code="invalid_spotify_auth_code",
        message="Spotify refused the authorization code",
        status=HTTPStatus.BAD_REQUEST,
    )
    ADD_USER_ERROR = ErrorEntry(
        code="add_user_error",
        message="Unable to save the linked user",
        status=HTTPStatus.INTERNAL_SERVER_ERROR,
    )

    @property
    def code(self) -> str:
        return self.value.code

    @property
    def message(self) -> str:
        return self.value.message

    @property
    def status(self) -> HTTPStatus:
        return self.value.status

    @classmethod
    def lookup(cls, name: str) -> tuple[str, HTTPStatus]:
        """Returns the message and HTTP status bound to a catalog entry name.

        Raises:
            KeyError: If no entry is registered under this name.
        """
        entry = cls[name]
        return entry.message, entry.status
