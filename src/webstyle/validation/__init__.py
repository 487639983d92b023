from webstyle.validation.validator import (
    ValidationError,
    summarize,
    validate,
    validate_or_raise,
)

__all__ = ["ValidationError", "summarize", "validate", "validate_or_raise"]
