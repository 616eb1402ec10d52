"""
Persistence for users.

UserStore is the contract the UsersService is built against;
DjangoUserStore implements it on the Django ORM.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction

from apps.core.errors import ConflictError
from .models import User

logger = logging.getLogger(__name__)

EMAIL_CONFLICT_MESSAGE = "Email já cadastrado"


class UserStore(ABC):
    """Repository interface for user records."""

    @abstractmethod
    def create(self, name: str, email: str) -> User:
        """Insert a new user. Raises ConflictError on a duplicate email."""
        pass

    @abstractmethod
    def find(self) -> List[User]:
        """All users, newest first."""
        pass

    @abstractmethod
    def find_one(self, user_id) -> Optional[User]:
        pass

    @abstractmethod
    def find_by_email(self, email: str, exclude_id: Optional[UUID] = None) -> Optional[User]:
        pass

    @abstractmethod
    def save(self, user: User, fields: List[str]) -> User:
        """Persist the given fields. Raises ConflictError on a duplicate email."""
        pass

    @abstractmethod
    def remove(self, user: User) -> None:
        """Delete the user and, by cascade, its tasks."""
        pass


class DjangoUserStore(UserStore):

    def create(self, name: str, email: str) -> User:
        try:
            with transaction.atomic():
                return User.objects.create(name=name, email=email)
        except IntegrityError:
            # Unique constraint caught a concurrent insert the pre-check missed
            logger.warning(f"Unique constraint rejected email {email}")
            raise ConflictError(EMAIL_CONFLICT_MESSAGE)

    def find(self) -> List[User]:
        return list(User.objects.order_by('-created_at'))

    def find_one(self, user_id) -> Optional[User]:
        try:
            return User.objects.get(id=user_id)
        except (User.DoesNotExist, DjangoValidationError, ValueError):
            return None

    def find_by_email(self, email: str, exclude_id: Optional[UUID] = None) -> Optional[User]:
        queryset = User.objects.filter(email=email)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.first()

    def save(self, user: User, fields: List[str]) -> User:
        if not fields:
            return user
        try:
            with transaction.atomic():
                user.save(update_fields=fields)
        except IntegrityError:
            logger.warning(f"Unique constraint rejected email {user.email}")
            raise ConflictError(EMAIL_CONFLICT_MESSAGE)
        return user

    def remove(self, user: User) -> None:
        with transaction.atomic():
            user.delete()
