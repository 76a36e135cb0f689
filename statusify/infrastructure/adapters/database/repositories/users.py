from datetime import UTC
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy import text
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from statusify.domain.entities.user import UserLink
from statusify.domain.ports.repositories.users import UserLinkRepository
from statusify.infrastructure.adapters.database.models import UserLink as UserLinkModel


def build_upsert_stmt(user_link: UserLink, dialect_name: str) -> Any:
    """Builds a single `INSERT ... ON CONFLICT DO UPDATE` statement on the chat user ID.

    On PostgreSQL, the statement also returns whether the row was created (`xmax`
    is only set on updated rows). SQLite has no equivalent and only returns the row.
    """
    values = {
        "chat_access_token": user_link.chat_access_token,
        "music_access_token": user_link.music_access_token,
        "music_refresh_token": user_link.music_refresh_token,
        "music_token_type": user_link.music_token_type,
        "music_expires_at": user_link.music_expires_at,
    }

    match dialect_name:
        case "postgresql":
            insert = pg_insert
            returning = (UserLinkModel, text("(xmax = 0) AS was_created"))
        case "sqlite":
            insert = sqlite_insert
            returning = (UserLinkModel,)
        case _:
            raise ValueError(f"Unsupported database dialect: {dialect_name}")

    return (
        insert(UserLinkModel)
        .values(chat_user_id=user_link.chat_user_id, **values)
        .on_conflict_do_update(
            index_elements=["chat_user_id"],
            set_={
                **values,
                "updated_at": datetime.now(UTC),
            },
        )
        .returning(*returning)
        # Refresh a row already loaded in the session with the returned values.
        .execution_options(populate_existing=True)
    )


class UserLinkSQLRepository(UserLinkRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, chat_user_id: str) -> UserLink | None:
        user_link_db = await self._get_model(chat_user_id)
        return user_link_db.to_entity() if user_link_db else None

    async def upsert(self, user_link: UserLink) -> tuple[UserLink, bool]:
        dialect_name = self.session.get_bind().dialect.name
        stmt = build_upsert_stmt(user_link, dialect_name)

        if dialect_name == "postgresql":
            result = await self.session.execute(stmt)
            user_link_db, created = result.one()
        else:
            # SQLite cannot tell an insert from an update within the statement itself.
            created = await self._get_model(user_link.chat_user_id) is None
            result = await self.session.execute(stmt)
            user_link_db = result.scalar_one()

        await self.session.commit()

        return user_link_db.to_entity(), created

    async def _get_model(self, chat_user_id: str) -> UserLinkModel | None:
        stmt = select(UserLinkModel).where(UserLinkModel.chat_user_id == chat_user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
