"""Services for Tasks app."""
import logging
from typing import List, Optional

from apps.core.errors import NotFoundError
from apps.users.services import UsersService, get_users_service
from .models import Task, TaskStatus
from .stores import DjangoTaskStore, TaskStore

logger = logging.getLogger(__name__)

TASK_NOT_FOUND_MESSAGE = "Tarefa não encontrada"


class TasksService:
    """
    Create/read/update/delete for tasks. A task can only be created for an
    existing user; its owner never changes afterwards.
    """

    def __init__(self, store: TaskStore, users: UsersService):
        self.store = store
        self.users = users

    def create(self, title: str, description: str, user_id, status: Optional[str] = None) -> Task:
        # Raises NotFoundError before anything is written
        user = self.users.get_by_id(user_id)

        task = self.store.create(
            title=title,
            description=description,
            user=user,
            status=status or TaskStatus.PENDING.value,
        )
        logger.info(f"Created task {task.id} for user {user.id}")
        return task

    def list(self) -> List[Task]:
        return self.store.find()

    def get_by_id(self, task_id) -> Task:
        task = self.store.find_one(task_id)
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND_MESSAGE)
        return task

    def update(
        self,
        task_id,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Task:
        task = self.get_by_id(task_id)

        changed = []
        for attr, value in (('title', title), ('description', description), ('status', status)):
            if value is not None and value != getattr(task, attr):
                setattr(task, attr, value)
                changed.append(attr)

        return self.store.save(task, changed)

    def delete(self, task_id) -> None:
        task = self.get_by_id(task_id)
        self.store.remove(task)
        logger.info(f"Deleted task {task_id}")


def get_tasks_service() -> TasksService:
    return TasksService(DjangoTaskStore(), get_users_service())
