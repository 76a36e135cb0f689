from datetime import UTC
from datetime import datetime
from datetime import timedelta

from pydantic import BaseModel
from pydantic import NonNegativeInt
from pydantic import computed_field


class SpotifyToken(BaseModel):
    token_type: str
    access_token: str
    refresh_token: str | None = None
    scope: str | None = None
    expires_in: NonNegativeInt

    @computed_field
    def expires_at(self) -> datetime:
        return datetime.now(UTC) + timedelta(seconds=self.expires_in)
