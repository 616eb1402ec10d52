"""
Persistence for tasks.

Every query loads the owning user alongside the task so the API can show
the owner's name without extra round trips.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from apps.users.models import User
from .models import Task


class TaskStore(ABC):
    """Repository interface for task records."""

    @abstractmethod
    def create(self, title: str, description: str, user: User, status: str) -> Task:
        pass

    @abstractmethod
    def find(self) -> List[Task]:
        """All tasks with their owners, newest first."""
        pass

    @abstractmethod
    def find_one(self, task_id) -> Optional[Task]:
        pass

    @abstractmethod
    def save(self, task: Task, fields: List[str]) -> Task:
        pass

    @abstractmethod
    def remove(self, task: Task) -> None:
        pass


class DjangoTaskStore(TaskStore):

    def _queryset(self):
        return Task.objects.select_related('user')

    def create(self, title: str, description: str, user: User, status: str) -> Task:
        with transaction.atomic():
            return Task.objects.create(
                title=title,
                description=description,
                user=user,
                status=status,
            )

    def find(self) -> List[Task]:
        return list(self._queryset().order_by('-created_at'))

    def find_one(self, task_id) -> Optional[Task]:
        try:
            return self._queryset().get(id=task_id)
        except (Task.DoesNotExist, DjangoValidationError, ValueError):
            return None

    def save(self, task: Task, fields: List[str]) -> Task:
        if fields:
            task.save(update_fields=fields)
        return task

    def remove(self, task: Task) -> None:
        task.delete()
