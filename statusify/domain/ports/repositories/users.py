from abc import ABC
from abc import abstractmethod

from statusify.domain.entities.user import UserLink


class UserLinkRepository(ABC):
    """A repository for managing `UserLink` entities.

    The linking flow only ever writes through `upsert`; reading is provided for
    operators and for services consuming the stored tokens.
    """

    @abstractmethod
    async def get(self, chat_user_id: str) -> UserLink | None:
        """Retrieves the link of a chat user.

        Args:
            chat_user_id: The chat platform identifier of the user.

        Returns:
            The `UserLink` entity if found, otherwise None.
        """
        ...

    @abstractmethod
    async def upsert(self, user_link: UserLink) -> tuple[UserLink, bool]:
        """Creates or replaces the link of a chat user.

        Args:
            user_link: The complete link, keyed by its chat user identifier.

        Returns:
            A tuple containing the stored `UserLink` entity and a boolean
            indicating whether the entity was created (True) or updated (False).
        """
        ...
