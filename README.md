# topicnames

Checks whether a topic name is well formed. When it is not, it reports
what is wrong and at which character.

A topic name may hold ASCII letters, digits, `_` and `/`. It may start
with `~`, which must then be followed by `/`. It may carry substitutions
in curly braces, such as `foo/{ping}/bar`. It must not be empty and must
not end with `/`. No token or substitution may start with a digit.
Substitutions may not nest and may not hold `/`.

## Installation

```
pip install .
```

## Usage

```python
from topicnames.validation import (
    ValidationResult,
    validate_topic_name,
    validation_result_string,
)

check = validate_topic_name("foo/{ping}/bar")
assert check.is_valid
assert check.result is ValidationResult.VALID
assert check.invalid_index is None

check = validate_topic_name("foo/123bar")
print(check.result.name)     # INVALID_NAME_TOKEN_STARTS_WITH_NUMBER
print(check.invalid_index)   # 4
print(check.message)         # topic name token must not start with a number
```

`validate_topic_name(topic_name)` returns a frozen `TopicNameValidation`. It has these members:

- `result`, a `ValidationResult`.
- `invalid_index`, the position of the offending character. It is `None` for a valid name.
- `is_valid`, which is true when the result is `ValidationResult.VALID`.
- `message`, which gives the explanation of the result.

If `topic_name` is not a `str`, the function raises `TypeError`.

`ValidationResult` is an `IntEnum` with these members:

- `VALID`
- `INVALID_IS_EMPTY_STRING`
- `INVALID_ENDS_WITH_FORWARD_SLASH`
- `INVALID_CONTAINS_UNALLOWED_CHARACTERS`
- `INVALID_NAME_TOKEN_STARTS_WITH_NUMBER`
- `INVALID_UNMATCHED_CURLY_BRACE`
- `INVALID_MISPLACED_TILDE`
- `INVALID_TILDE_NOT_FOLLOWED_BY_FORWARD_SLASH`
- `INVALID_SUBSTITUTION_CONTAINS_UNALLOWED_CHARACTERS`
- `INVALID_SUBSTITUTION_STARTS_WITH_NUMBER`

`validation_result_string(result)` takes a `ValidationResult` or its integer value. It returns a readable explanation for each failure. It returns `None` for `VALID` and for any value that is not a member.

## What it does not do

This package only validates names. It does the following:

- It does not expand `~` or substitutions.
- It does not turn relative names into absolute ones.
- It does not strip URL-style prefixes.
- It does not check for empty tokens such as `foo//bar`.

## Running the tests

```
pip install .[test]
pytest
```