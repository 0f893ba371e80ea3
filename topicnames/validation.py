"""Validation of topic names against the naming rules for topics and services."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum

_DIGITS = frozenset(string.digits)
_ALNUM = frozenset(string.ascii_letters + string.digits)


class ValidationResult(IntEnum):
    """Outcome of validating a topic name."""

    VALID = 0
    INVALID_IS_EMPTY_STRING = 1
    INVALID_ENDS_WITH_FORWARD_SLASH = 2
    INVALID_CONTAINS_UNALLOWED_CHARACTERS = 3
    INVALID_NAME_TOKEN_STARTS_WITH_NUMBER = 4
    INVALID_UNMATCHED_CURLY_BRACE = 5
    INVALID_MISPLACED_TILDE = 6
    INVALID_TILDE_NOT_FOLLOWED_BY_FORWARD_SLASH = 7
    INVALID_SUBSTITUTION_CONTAINS_UNALLOWED_CHARACTERS = 8
    INVALID_SUBSTITUTION_STARTS_WITH_NUMBER = 9


_MESSAGES = {
    ValidationResult.INVALID_IS_EMPTY_STRING: "topic name must not be empty string",
    ValidationResult.INVALID_ENDS_WITH_FORWARD_SLASH:
        "topic name must not end with a forward slash",
    ValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS:
        "topic name must not contain characters other than alphanumerics, "
        "'_', '~', '{', or '}'",
    ValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER:
        "topic name token must not start with a number",
    ValidationResult.INVALID_UNMATCHED_CURLY_BRACE:
        "topic name must not have unmatched (unbalanced) curly braces '{}'",
    ValidationResult.INVALID_MISPLACED_TILDE:
        "topic name must not have tilde '~' unless it is the first character",
    ValidationResult.INVALID_TILDE_NOT_FOLLOWED_BY_FORWARD_SLASH:
        "topic name must not have a tilde '~' that is not followed by a forward slash '/'",
    ValidationResult.INVALID_SUBSTITUTION_CONTAINS_UNALLOWED_CHARACTERS:
        "substitution name must not contain characters other than alphanumerics or '_'",
    ValidationResult.INVALID_SUBSTITUTION_STARTS_WITH_NUMBER:
        "substitution name must not start with a number",
}


@dataclass(frozen=True)
class TopicNameValidation:
    """Result of a validation and, when invalid, the index of the offending character."""

    result: ValidationResult
    invalid_index: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.result is ValidationResult.VALID

    @property
    def message(self) -> str | None:
        return validation_result_string(self.result)


def _invalid(result: ValidationResult, index: int) -> TopicNameValidation:
    return TopicNameValidation(result, index)


def validate_topic_name(topic_name: str) -> TopicNameValidation:
    """Check a topic name against the topic naming rules.

    Raises TypeError if the name is not a string.
    """
    if not isinstance(topic_name, str):
        raise TypeError(f"topic_name must be a str, not {type(topic_name).__name__}")

    if not topic_name:
        return _invalid(ValidationResult.INVALID_IS_EMPTY_STRING, 0)
    if topic_name[0] in _DIGITS:
        return _invalid(ValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER, 0)
    if topic_name.endswith("/"):
        return _invalid(
            ValidationResult.INVALID_ENDS_WITH_FORWARD_SLASH, len(topic_name) - 1
        )

    in_brace = False
    brace_index = 0
    for i, ch in enumerate(topic_name):
        if ch in _ALNUM:
            if ch in _DIGITS and in_brace and i > 0 and i - 1 == brace_index:
                return _invalid(ValidationResult.INVALID_SUBSTITUTION_STARTS_WITH_NUMBER, i)
        elif ch == "_":
            continue
        elif ch == "/":
            if in_brace:
                return _invalid(
                    ValidationResult.INVALID_SUBSTITUTION_CONTAINS_UNALLOWED_CHARACTERS, i
                )
        elif ch == "~":
            if i != 0:
                return _invalid(ValidationResult.INVALID_MISPLACED_TILDE, i)
        elif ch == "{":
            brace_index = i
            if in_brace:
                return _invalid(
                    ValidationResult.INVALID_SUBSTITUTION_CONTAINS_UNALLOWED_CHARACTERS, i
                )
            in_brace = True
        elif ch == "}":
            if not in_brace:
                return _invalid(ValidationResult.INVALID_UNMATCHED_CURLY_BRACE, i)
            in_brace = False
        elif in_brace:
            return _invalid(
                ValidationResult.INVALID_SUBSTITUTION_CONTAINS_UNALLOWED_CHARACTERS, i
            )
        else:
            return _invalid(ValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS, i)

    if in_brace:
        return _invalid(ValidationResult.INVALID_UNMATCHED_CURLY_BRACE, brace_index)

    for i, (ch, following) in enumerate(zip(topic_name, topic_name[1:])):
        if ch == "/":
            if following in _DIGITS:
                return _invalid(
                    ValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER, i + 1
                )
        elif i == 1 and topic_name[0] == "~":
            return _invalid(
                ValidationResult.INVALID_TILDE_NOT_FOLLOWED_BY_FORWARD_SLASH, 1
            )

    return TopicNameValidation(ValidationResult.VALID)


def validation_result_string(result: int) -> str | None:
    """Describe a validation result; None for a valid name or an unknown value."""
    try:
        key = ValidationResult(result)
    except ValueError:
        return None
    return _MESSAGES.get(key)