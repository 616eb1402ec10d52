"""
Declarative payload validation.

Each request payload is described by a tuple of FieldRule entries. The
validator walks the table in order and returns every violated message, so
the API can report all problems of a request at once:

    messages = validate_payload(CREATE_USER_RULES, data)
    if messages:
        raise ValidationError(messages)

Validation is pure: it never touches the database.
"""
import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.http import HttpRequest

from .errors import ValidationError

INVALID_BODY_MESSAGE = "O corpo da requisição deve ser um objeto JSON"

# Canonical hyphenated form only; braced, bare-hex and urn: spellings are rejected
_UUID4_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE
)


class Format:
    EMAIL = "email"
    UUID4 = "uuid4"


@dataclass(frozen=True)
class FieldRule:
    """
    One field of a payload.

    `messages` maps a rule key to its human-readable text. Keys:
    required, blank, type, max_length, format, choices.

    `nullable=False` makes an explicit null an error even on an optional
    field; by default null counts as "not supplied".
    """
    name: str
    required: bool = False
    type: type = str
    max_length: Optional[int] = None
    format: Optional[str] = None
    choices: Tuple[str, ...] = ()
    nullable: bool = True
    messages: Dict[str, str] = field(default_factory=dict)

    def message(self, key: str) -> str:
        return self.messages.get(key) or f"{self.name} is invalid"


def _is_blank(value: Any) -> bool:
    return value == ""


def _matches_format(fmt: str, value: str) -> bool:
    if fmt == Format.EMAIL:
        try:
            validate_email(value)
        except DjangoValidationError:
            return False
        return True
    if fmt == Format.UUID4:
        return bool(_UUID4_RE.match(value))
    raise ValueError(f"Unknown format: {fmt}")


def _check_field(rule: FieldRule, value: Any) -> List[str]:
    if rule.type is str and not isinstance(value, str):
        # Format and length rules only make sense on strings
        if rule.format:
            return [rule.message("format")]
        return [rule.message("choices" if rule.choices else "type")]

    errors = []
    if rule.max_length is not None and len(value) > rule.max_length:
        errors.append(rule.message("max_length"))
    if rule.format and not _matches_format(rule.format, value):
        errors.append(rule.message("format"))
    if rule.choices and value not in rule.choices:
        errors.append(rule.message("choices"))
    return errors


def validate_payload(rules: Tuple[FieldRule, ...], data: Dict[str, Any]) -> List[str]:
    """
    Validate `data` against a rule table.

    - Unknown keys are rejected.
    - A required field that is missing, null or empty reports only its
      `required` message.
    - An optional field that is missing is skipped, as is an explicit null
      unless the rule is not nullable; an empty string reports its `blank`
      message.
    - Otherwise every violated rule of the field is reported, in table order.
    """
    errors: List[str] = []
    known = {rule.name for rule in rules}
    for key in data:
        if key not in known:
            errors.append(f"property {key} should not exist")

    for rule in rules:
        value = data.get(rule.name)
        if value is None or (rule.required and _is_blank(value)):
            if rule.required:
                errors.append(rule.message("required"))
            elif rule.name in data and not rule.nullable:
                errors.append(rule.message("choices" if rule.choices else "type"))
            continue
        if _is_blank(value):
            errors.append(rule.message("blank"))
            continue
        errors.extend(_check_field(rule, value))

    return errors


def clean_payload(rules: Tuple[FieldRule, ...], data: Dict[str, Any]) -> Dict[str, Any]:
    """Return only the fields that were supplied with a non-null value."""
    return {
        rule.name: data[rule.name]
        for rule in rules
        if data.get(rule.name) is not None
    }


def parse_payload(request: HttpRequest, rules: Tuple[FieldRule, ...]) -> Dict[str, Any]:
    """
    Decode the JSON body of `request` and validate it against `rules`.

    Raises ValidationError with every violation; returns the supplied fields.
    """
    try:
        data = json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError):
        raise ValidationError([INVALID_BODY_MESSAGE])

    if not isinstance(data, dict):
        raise ValidationError([INVALID_BODY_MESSAGE])

    errors = validate_payload(rules, data)
    if errors:
        raise ValidationError(errors)
    return clean_payload(rules, data)


def openapi_body(schema) -> dict:
    """
    `openapi_extra` entry documenting a JSON body that is parsed by
    parse_payload instead of a ninja body parameter.
    """
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }
