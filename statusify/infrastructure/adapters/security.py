from datetime import datetime

import jwt

from statusify.domain.exceptions import CarrierInvalidError
from statusify.domain.ports.security import CarrierSignerPort


class JwtCarrierSigner(CarrierSignerPort):
    """An implementation of the `CarrierSignerPort` using JSON Web Tokens (JWT).

    Each carrier becomes a compact JWS holding the value, the name it was issued
    under and its expiry, relying on the `PyJWT` library. Expiry is enforced on
    verification, whatever the client did with the cookie expiry.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256") -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm

    def sign(self, name: str, value: str, expires_at: datetime) -> str:
        payload = {
            "carrier": name,
            "value": value,
            "exp": expires_at,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def unsign(self, name: str, signed_value: str) -> str:
        try:
            payload = jwt.decode(
                signed_value,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise CarrierInvalidError(f"Carrier '{name}' has expired") from e
        except jwt.InvalidTokenError as e:
            raise CarrierInvalidError(f"Carrier '{name}' is invalid") from e

        # Prevent a carrier from being replayed under another name.
        if payload.get("carrier") != name:
            raise CarrierInvalidError(f"Carrier '{name}' was issued under another name")

        value = payload.get("value")
        if not isinstance(value, str):
            raise CarrierInvalidError(f"Carrier '{name}' has no value")

        return value
