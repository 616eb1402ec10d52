"""
Users API endpoints.

Provides CRUD operations for users. Bodies are parsed and validated
against the rule tables in dtos.py before any database access.
"""
from typing import List

from django.http import HttpRequest
from ninja import Router

from apps.core.errors import ErrorOut, ValidationErrorOut
from apps.core.validation import openapi_body, parse_payload
from .dtos import (
    CREATE_USER_RULES,
    UPDATE_USER_RULES,
    UserCreateIn,
    UserOut,
    UserUpdateIn,
)
from .services import get_users_service

router = Router(tags=["users"])


@router.post(
    "",
    response={201: UserOut, 400: ValidationErrorOut, 409: ErrorOut},
    summary="Criar novo usuário",
    openapi_extra=openapi_body(UserCreateIn),
)
def create_user_api(request: HttpRequest):
    """
    Create a user. The email must not belong to another user.
    """
    payload = parse_payload(request, CREATE_USER_RULES)
    user = get_users_service().create(**payload)
    return 201, user


@router.get("", response=List[UserOut], summary="Listar todos os usuários")
def list_users_api(request: HttpRequest):
    """
    List all users, newest first.
    """
    return get_users_service().list()


@router.get("/{user_id}", response={200: UserOut, 404: ErrorOut}, summary="Buscar usuário por ID")
def get_user_api(request: HttpRequest, user_id: str):
    return get_users_service().get_by_id(user_id)


@router.put(
    "/{user_id}",
    response={200: UserOut, 400: ValidationErrorOut, 404: ErrorOut, 409: ErrorOut},
    summary="Atualizar usuário",
    openapi_extra=openapi_body(UserUpdateIn),
)
def update_user_api(request: HttpRequest, user_id: str):
    """
    Partially update a user. Only the supplied fields change.
    """
    payload = parse_payload(request, UPDATE_USER_RULES)
    return get_users_service().update(user_id, **payload)


@router.delete("/{user_id}", response={204: None, 404: ErrorOut}, summary="Deletar usuário")
def delete_user_api(request: HttpRequest, user_id: str):
    """
    Delete a user together with all of its tasks.
    """
    get_users_service().delete(user_id)
    return 204, None
