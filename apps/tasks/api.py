"""
Tasks API endpoints.

Provides CRUD operations for tasks. Read and update responses include the
name of the owning user.
"""
from typing import List

from django.http import HttpRequest
from ninja import Router

from apps.core.errors import ErrorOut, ValidationErrorOut
from apps.core.validation import openapi_body, parse_payload
from .dtos import (
    CREATE_TASK_RULES,
    UPDATE_TASK_RULES,
    TaskCreateIn,
    TaskDetailOut,
    TaskOut,
    TaskUpdateIn,
)
from .services import get_tasks_service

router = Router(tags=["tasks"])


@router.post(
    "",
    response={201: TaskOut, 400: ValidationErrorOut, 404: ErrorOut},
    summary="Criar nova tarefa",
    openapi_extra=openapi_body(TaskCreateIn),
)
def create_task_api(request: HttpRequest):
    """
    Create a task for an existing user. Status defaults to "pending".
    """
    payload = parse_payload(request, CREATE_TASK_RULES)
    task = get_tasks_service().create(
        title=payload['title'],
        description=payload['description'],
        user_id=payload['userId'],
        status=payload.get('status'),
    )
    return 201, task


@router.get("", response=List[TaskDetailOut], summary="Listar todas as tarefas")
def list_tasks_api(request: HttpRequest):
    """
    List all tasks, newest first, with the owner's name.
    """
    return get_tasks_service().list()


@router.get("/{task_id}", response={200: TaskDetailOut, 404: ErrorOut}, summary="Buscar tarefa por ID")
def get_task_api(request: HttpRequest, task_id: str):
    return get_tasks_service().get_by_id(task_id)


@router.put(
    "/{task_id}",
    response={200: TaskDetailOut, 400: ValidationErrorOut, 404: ErrorOut},
    summary="Atualizar tarefa",
    openapi_extra=openapi_body(TaskUpdateIn),
)
def update_task_api(request: HttpRequest, task_id: str):
    """
    Partially update a task. The owner cannot be changed.
    """
    payload = parse_payload(request, UPDATE_TASK_RULES)
    return get_tasks_service().update(task_id, **payload)


@router.delete("/{task_id}", response={204: None, 404: ErrorOut}, summary="Deletar tarefa")
def delete_task_api(request: HttpRequest, task_id: str):
    get_tasks_service().delete(task_id)
    return 204, None
