"""
Validation helpers for imported backup data.
"""
from pydantic import ValidationError as PydanticValidationError


def summarize_validation_error(error: PydanticValidationError) -> str:
    """Condense a pydantic error into one line naming the first failing field."""
    errors = error.errors()
    if not errors:
        return str(error)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    if len(errors) > 1:
        message += f" (and {len(errors) - 1} more)"
    return message
