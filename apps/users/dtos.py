"""
Request rules and response schemas for Users app.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from ninja import Field, Schema

from apps.core.validation import FieldRule, Format

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255

_NAME_MESSAGES = {
    'required': 'O nome é obrigatório',
    'blank': 'O nome não pode ser vazio',
    'type': 'O nome deve ser uma string',
    'max_length': f'O nome deve ter no máximo {NAME_MAX_LENGTH} caracteres',
}

_EMAIL_MESSAGES = {
    'required': 'O email é obrigatório',
    'blank': 'O email deve ser válido',
    'format': 'O email deve ser válido',
    'max_length': f'O email deve ter no máximo {EMAIL_MAX_LENGTH} caracteres',
}

CREATE_USER_RULES = (
    FieldRule('name', required=True, max_length=NAME_MAX_LENGTH, messages=_NAME_MESSAGES),
    FieldRule('email', required=True, max_length=EMAIL_MAX_LENGTH, format=Format.EMAIL, messages=_EMAIL_MESSAGES),
)

UPDATE_USER_RULES = (
    FieldRule('name', max_length=NAME_MAX_LENGTH, messages=_NAME_MESSAGES),
    FieldRule('email', max_length=EMAIL_MAX_LENGTH, format=Format.EMAIL, messages=_EMAIL_MESSAGES),
)


class UserCreateIn(Schema):
    """Body of POST /users (documentation only, see CREATE_USER_RULES)."""
    name: str = Field(..., max_length=NAME_MAX_LENGTH, examples=["João Silva"])
    email: str = Field(..., max_length=EMAIL_MAX_LENGTH, examples=["joao.silva@example.com"])


class UserUpdateIn(Schema):
    """Body of PUT /users/{id} (documentation only, see UPDATE_USER_RULES)."""
    name: Optional[str] = Field(None, max_length=NAME_MAX_LENGTH)
    email: Optional[str] = Field(None, max_length=EMAIL_MAX_LENGTH)


class UserOut(Schema):
    id: UUID
    name: str
    email: str
    createdAt: datetime = Field(..., alias='created_at')

