from validstr.services import string_validator


__all__ = [
    "string_validator",
]
