from statusify.infrastructure.adapters.database.models.base import Base
from statusify.infrastructure.adapters.database.models.user import UserLink

__all__ = ["Base", "UserLink"]
