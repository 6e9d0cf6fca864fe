"""Request body validation.

Rule sets are plain lists of ``Rule`` entries. ``run_rules`` walks a rule set
against a request body and keeps the message of the first failing rule per
field. ``validated_body`` turns a rule set plus a Pydantic schema into a
FastAPI dependency that rejects the request with a 400 before the route
handler (and therefore any database call) runs.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

from email_validator import EmailNotValidError, validate_email
from fastapi import Request
from pydantic import BaseModel, ValidationError

from blog_api.core.errors import validation_failed
from blog_api.core.roles import Role

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Sentinel handed to predicates for keys the body does not contain
MISSING = object()


@dataclass(frozen=True)
class Rule:
    """A single field check.

    Attributes:
        field: Body key the rule inspects
        check: Predicate returning True when the value is acceptable
        message: Error reported for the field when ``check`` returns False
        optional: Skip the rule when the key is absent from the body
    """

    field: str
    check: Callable[[Any], bool]
    message: str
    optional: bool = False


def not_empty(value: Any) -> bool:
    """True for a non-empty string value."""
    if value is MISSING or value is None:
        return False
    return len(str(value)) >= 1


def is_email(value: Any) -> bool:
    """True when the value has valid email syntax."""
    if not isinstance(value, str):
        return False
    try:
        # Syntax only: no DNS lookups and no special-use domain policy
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def one_of(*choices: str) -> Callable[[Any], bool]:
    """Build a predicate accepting only the given values."""

    def _check(value: Any) -> bool:
        return value in choices

    return _check


USER_RULES: list[Rule] = [
    Rule("email", not_empty, "Email must not be empty"),
    Rule("email", is_email, "Must be a valid email"),
    Rule("name", not_empty, "Name must not be empty"),
    Rule(
        "role",
        one_of(*(role.value for role in Role)),
        "Role must be 'ADMIN', 'USER', 'SUPERADMIN'",
        optional=True,
    ),
]

POST_RULES: list[Rule] = [
    Rule("title", not_empty, "Please Provide title for this post"),
]


def run_rules(body: Any, rules: list[Rule]) -> dict[str, str]:
    """Evaluate a rule set against a request body.

    Args:
        body: Decoded JSON body. Anything other than a dict is treated as empty
        rules: Rules to evaluate, in order

    Returns:
        dict[str, str]: Field name to first failing message. Empty when valid
    """
    if not isinstance(body, dict):
        body = {}

    errors: dict[str, str] = {}
    for rule in rules:
        if rule.field in errors:
            continue
        value = body.get(rule.field, MISSING)
        if value is MISSING and rule.optional:
            continue
        if not rule.check(value):
            errors[rule.field] = rule.message
    return errors


def schema_errors(exc: ValidationError) -> dict[str, str]:
    """Flatten Pydantic errors into the same field-to-message shape."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        errors.setdefault(field, error["msg"])
    return errors


async def read_json_body(request: Request) -> Any:
    """Decode the request body, returning None when it is not valid JSON."""
    try:
        return await request.json()
    except ValueError:
        logger.debug("Request body for %s is not valid JSON", request.url.path)
        return None


def validated_body(
    schema: type[SchemaT], rules: list[Rule]
) -> Callable[[Request], Awaitable[SchemaT]]:
    """Create a dependency that validates and parses the request body.

    Args:
        schema: Pydantic model the body is parsed into once the rules pass
        rules: Rule set checked first

    Returns:
        An async dependency returning the parsed ``schema`` instance

    Example:
        ```python
        @router.post("")
        def create_post(
            post_data: Annotated[PostCreate, Depends(validated_body(PostCreate, POST_RULES))],
        ):
            ...
        ```
    """

    async def _dependency(request: Request) -> SchemaT:
        body = await read_json_body(request)

        errors = run_rules(body, rules)
        if errors:
            raise validation_failed(errors)

        try:
            return schema.model_validate(body)
        except ValidationError as e:
            raise validation_failed(schema_errors(e)) from e

    return _dependency
