"""
Registration input validation.

Field validators
================

Each field validator is a pure function ``str -> Result`` that runs every
check for its field and returns either ``Ok(normalized)`` or
``Err(messages)`` where ``messages`` holds every triggered check, in check
order:

    username  blank -> min length (1) -> max length (25)
    email     blank -> format (local@domain) -> max length (350)
    password  blank -> min length (8) -> max length (100)

Combining fields
================

``validate`` runs all three field validators unconditionally and returns a
``ValidationOutcome``: ``Valid`` with the normalized input, or ``Invalid``
with one ValidationError per failed field, ordered username, email,
password.

``to_result`` is the single bridge from that accumulating outcome into the
short-circuit pipeline: it reports only the first failed field, wrapped in
IncorrectInput.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from .errors import (
    IncorrectInput,
    InvalidEmail,
    InvalidPassword,
    InvalidUsername,
    ValidationError,
)
from .result import Err, Ok, Result

USERNAME_MIN_LENGTH = 1
USERNAME_MAX_LENGTH = 25
EMAIL_MAX_LENGTH = 350
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 100

BLANK_MESSAGE = "Cannot be blank"

_EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")

Check = Callable[[str], str | None]


@dataclass(frozen=True)
class RegisterUser:
    """Raw or normalized registration input."""

    username: str
    email: str
    password: str


@dataclass(frozen=True)
class Valid:
    """Every field passed; ``value`` holds the normalized input."""

    value: RegisterUser


@dataclass(frozen=True)
class Invalid:
    """At least one field failed; errors are in field priority order."""

    errors: tuple[ValidationError, ...]


ValidationOutcome = Valid | Invalid


def _not_blank(value: str) -> str | None:
    if not value.strip():
        return BLANK_MESSAGE
    return None


def _min_length(minimum: int) -> Check:
    def check(value: str) -> str | None:
        if len(value) < minimum:
            return f"is too short (minimum is {minimum} characters)"
        return None

    return check


def _max_length(maximum: int) -> Check:
    def check(value: str) -> str | None:
        if len(value) > maximum:
            return f"is too long (maximum is {maximum} characters)"
        return None

    return check


def _email_format(value: str) -> str | None:
    if _EMAIL_PATTERN.fullmatch(value) is None:
        return f"'{value}' is invalid email"
    return None


def _run_checks(value: str, checks: tuple[Check, ...]) -> tuple[str, ...]:
    messages = []
    for check in checks:
        message = check(value)
        if message is not None:
            messages.append(message)
    return tuple(messages)


_USERNAME_CHECKS = (
    _not_blank,
    _min_length(USERNAME_MIN_LENGTH),
    _max_length(USERNAME_MAX_LENGTH),
)
_EMAIL_CHECKS = (_not_blank, _email_format, _max_length(EMAIL_MAX_LENGTH))
_PASSWORD_CHECKS = (
    _not_blank,
    _min_length(PASSWORD_MIN_LENGTH),
    _max_length(PASSWORD_MAX_LENGTH),
)


def validate_username(username: str) -> Result[str, tuple[str, ...]]:
    """Validate a username; surrounding whitespace is trimmed first."""
    trimmed = username.strip()
    messages = _run_checks(trimmed, _USERNAME_CHECKS)
    if messages:
        return Err(messages)
    return Ok(trimmed)


def validate_email(email: str) -> Result[str, tuple[str, ...]]:
    """
    Validate an email address.

    Checks run on the trimmed value, so format messages quote it without
    surrounding whitespace. The normalized value is also lowercased.
    """
    trimmed = email.strip()
    messages = _run_checks(trimmed, _EMAIL_CHECKS)
    if messages:
        return Err(messages)
    return Ok(trimmed.lower())


def validate_password(password: str) -> Result[str, tuple[str, ...]]:
    """Validate a password. Passwords are never trimmed."""
    messages = _run_checks(password, _PASSWORD_CHECKS)
    if messages:
        return Err(messages)
    return Ok(password)


def validate(user: RegisterUser) -> ValidationOutcome:
    """Run every field validator and collect all field failures."""
    username = validate_username(user.username)
    email = validate_email(user.email)
    password = validate_password(user.password)

    errors: list[ValidationError] = []
    if isinstance(username, Err):
        errors.append(InvalidUsername(username.error))
    if isinstance(email, Err):
        errors.append(InvalidEmail(email.error))
    if isinstance(password, Err):
        errors.append(InvalidPassword(password.error))

    if errors:
        return Invalid(tuple(errors))
    return Valid(RegisterUser(username.value, email.value, password.value))


def to_result(outcome: ValidationOutcome) -> Result[RegisterUser, IncorrectInput]:
    """Report the highest-priority field failure, or pass the input through."""
    if isinstance(outcome, Invalid):
        return Err(IncorrectInput(outcome.errors[0]))
    return Ok(outcome.value)
