"""Services for Users app."""
import logging
from typing import List, Optional

from apps.core.errors import ConflictError, NotFoundError
from .models import User
from .stores import DjangoUserStore, UserStore, EMAIL_CONFLICT_MESSAGE

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "Usuário não encontrado"


class UsersService:
    """
    Create/read/update/delete for users. Owns email uniqueness.
    """

    def __init__(self, store: UserStore):
        self.store = store

    def create(self, name: str, email: str) -> User:
        if self.store.find_by_email(email):
            logger.info(f"Rejected user creation: email {email} already registered")
            raise ConflictError(EMAIL_CONFLICT_MESSAGE)

        user = self.store.create(name=name, email=email)
        logger.info(f"Created user {user.id}")
        return user

    def list(self) -> List[User]:
        return self.store.find()

    def get_by_id(self, user_id) -> User:
        user = self.store.find_one(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        return user

    def update(self, user_id, name: Optional[str] = None, email: Optional[str] = None) -> User:
        """
        Partial update: only arguments that are not None are applied.
        """
        user = self.get_by_id(user_id)

        changed = []
        if email is not None and email != user.email:
            # Compare against other users only, never the record itself
            if self.store.find_by_email(email, exclude_id=user.id):
                logger.info(f"Rejected update of user {user.id}: email {email} already registered")
                raise ConflictError(EMAIL_CONFLICT_MESSAGE)
            user.email = email
            changed.append('email')

        if name is not None and name != user.name:
            user.name = name
            changed.append('name')

        return self.store.save(user, changed)

    def delete(self, user_id) -> None:
        user = self.get_by_id(user_id)
        self.store.remove(user)
        logger.info(f"Deleted user {user_id} and its tasks")


def get_users_service() -> UsersService:
    return UsersService(DjangoUserStore())
