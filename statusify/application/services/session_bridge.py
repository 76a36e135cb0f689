import logging
from collections.abc import Mapping
from datetime import UTC
from datetime import datetime
from datetime import timedelta
from typing import Final

from statusify.domain.entities.auth import Carrier
from statusify.domain.entities.auth import ChatIdentity
from statusify.domain.exceptions import CarrierMissingError
from statusify.domain.ports.security import CarrierSignerPort

logger = logging.getLogger(__name__)


class SessionBridge:
    """
    Moves the Slack identity across the Spotify redirect.

    Nothing is stored server side: the identity lives in two signed carriers,
    one per field, held by the client until the Spotify callback comes back.
    """

    USER_ID: Final[str] = "user_id"
    ACCESS_TOKEN: Final[str] = "slack_access_token"

    def __init__(self, signer: CarrierSignerPort, ttl: timedelta = timedelta(hours=1)) -> None:
        self.signer = signer
        self.ttl = ttl

    def issue(self, identity: ChatIdentity) -> list[Carrier]:
        # Both carriers share the same absolute expiry.
        expires_at = datetime.now(UTC) + self.ttl

        return [
            self._carrier(self.USER_ID, identity.chat_user_id, expires_at),
            self._carrier(self.ACCESS_TOKEN, identity.chat_access_token, expires_at),
        ]

    def read(self, carriers: Mapping[str, str]) -> ChatIdentity:
        """Reads back the identity from the carriers sent by the client.

        Args:
            carriers: The carriers received with the request, by name (e.g. cookies).

        Returns:
            The identity issued at the end of the first hop.

        Raises:
            CarrierMissingError: If a carrier is absent or empty.
            CarrierInvalidError: If a carrier does not verify.
        """
        values: dict[str, str] = {}

        for name in (self.USER_ID, self.ACCESS_TOKEN):
            signed_value = carriers.get(name)
            if not signed_value:
                logger.debug("Carrier '%s' not found", name)
                raise CarrierMissingError(f"Missing carrier '{name}'")

            value = self.signer.unsign(name, signed_value)
            if not value:
                raise CarrierMissingError(f"Empty carrier '{name}'")

            values[name] = value

        return ChatIdentity(
            chat_user_id=values[self.USER_ID],
            chat_access_token=values[self.ACCESS_TOKEN],
        )

    def _carrier(self, name: str, value: str, expires_at: datetime) -> Carrier:
        return Carrier(
            name=name,
            value=self.signer.sign(name, value, expires_at),
            expires_at=expires_at,
        )
