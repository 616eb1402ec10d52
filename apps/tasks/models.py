import uuid
from django.db import models

from apps.users.models import User


class TaskStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    DONE = 'done', 'Done'


class Task(models.Model):
    """
    A unit of work owned by a user. Removed together with its owner.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    status = models.CharField(
        max_length=20,
        choices=TaskStatus.choices,
        default=TaskStatus.PENDING
    )
    # Owner is fixed at creation
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='tasks',
        db_column='user_id',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'tasks'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.status})"
