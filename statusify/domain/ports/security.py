from abc import ABC
from abc import abstractmethod
from datetime import datetime


class CarrierSignerPort(ABC):
    """Interface for protecting the integrity of client-held carriers.

    Values moved across a redirect through the client are signed before being
    handed out, and verified when they come back.
    """

    @abstractmethod
    def sign(self, name: str, value: str, expires_at: datetime) -> str:
        """Signs a carrier value, binding it to its name and expiry.

        Args:
            name: The name of the carrier (e.g. the cookie name).
            value: The plain value to carry.
            expires_at: The instant after which the carrier must be refused.

        Returns:
            The signed value to hand out to the client.
        """
        pass

    @abstractmethod
    def unsign(self, name: str, signed_value: str) -> str:
        """Verifies a signed carrier value and returns the plain value.

        Args:
            name: The name under which the carrier was received.
            signed_value: The value sent back by the client.

        Returns:
            The plain value.

        Raises:
            CarrierInvalidError: If the signature, name or expiry does not verify.
        """
        pass
