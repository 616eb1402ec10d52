"""
Request rules and response schemas for Tasks app.
"""
from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from ninja import Field, Schema

from apps.core.validation import FieldRule, Format
from .models import TaskStatus

TITLE_MAX_LENGTH = 255

_TITLE_MESSAGES = {
    'required': 'O título é obrigatório',
    'blank': 'O título não pode ser vazio',
    'type': 'O título deve ser uma string',
    'max_length': f'O título deve ter no máximo {TITLE_MAX_LENGTH} caracteres',
}

_DESCRIPTION_MESSAGES = {
    'required': 'A descrição é obrigatória',
    'blank': 'A descrição não pode ser vazia',
    'type': 'A descrição deve ser uma string',
}

_USER_ID_MESSAGES = {
    'required': 'O userId é obrigatório',
    'format': 'O userId deve ser um UUID válido',
}

_STATUS_MESSAGES = {
    'blank': 'Status deve ser pending ou done',
    'choices': 'Status deve ser pending ou done',
}

CREATE_TASK_RULES = (
    FieldRule('title', required=True, max_length=TITLE_MAX_LENGTH, messages=_TITLE_MESSAGES),
    FieldRule('description', required=True, messages=_DESCRIPTION_MESSAGES),
    FieldRule('userId', required=True, format=Format.UUID4, messages=_USER_ID_MESSAGES),
    FieldRule('status', choices=tuple(TaskStatus.values), nullable=False, messages=_STATUS_MESSAGES),
)

# userId is deliberately absent: the owner of a task never changes
UPDATE_TASK_RULES = (
    FieldRule('title', max_length=TITLE_MAX_LENGTH, messages=_TITLE_MESSAGES),
    FieldRule('description', messages=_DESCRIPTION_MESSAGES),
    FieldRule('status', choices=tuple(TaskStatus.values), messages=_STATUS_MESSAGES),
)

StatusLiteral = Literal['pending', 'done']


class TaskCreateIn(Schema):
    """Body of POST /tasks (documentation only, see CREATE_TASK_RULES)."""
    title: str = Field(..., max_length=TITLE_MAX_LENGTH, examples=["Estudar Django"])
    description: str = Field(..., examples=["Estudar models, views e o ORM"])
    userId: UUID
    status: StatusLiteral = TaskStatus.PENDING.value


class TaskUpdateIn(Schema):
    """Body of PUT /tasks/{id} (documentation only, see UPDATE_TASK_RULES)."""
    title: Optional[str] = Field(None, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = None
    status: Optional[StatusLiteral] = None


class TaskOut(Schema):
    id: UUID
    title: str
    description: str
    status: str
    userId: UUID = Field(..., alias='user_id')
    createdAt: datetime = Field(..., alias='created_at')


class TaskDetailOut(TaskOut):
    userName: str = Field(..., alias='user.name')
