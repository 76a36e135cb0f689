from datetime import datetime

from sqlalchemy import String
from sqlalchemy import Text
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column

from statusify.domain.entities.user import UserLink as UserLinkEntity
from statusify.infrastructure.adapters.database.models.base import Base
from statusify.infrastructure.adapters.database.models.base import DatetimeTrackMixin
from statusify.infrastructure.adapters.database.models.base import UTCDateTime


class UserLink(DatetimeTrackMixin, Base, kw_only=True):
    __tablename__ = "statusify_user_link"

    chat_user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    chat_access_token: Mapped[str] = mapped_column(Text, nullable=False)

    music_access_token: Mapped[str] = mapped_column(Text, nullable=False)
    music_refresh_token: Mapped[str] = mapped_column(Text, nullable=False)
    music_token_type: Mapped[str] = mapped_column(String(64), nullable=False)
    music_expires_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)

    def to_entity(self) -> UserLinkEntity:
        return UserLinkEntity(
            chat_user_id=self.chat_user_id,
            chat_access_token=self.chat_access_token,
            music_access_token=self.music_access_token,
            music_refresh_token=self.music_refresh_token,
            music_token_type=self.music_token_type,
            music_expires_at=self.music_expires_at,
        )
