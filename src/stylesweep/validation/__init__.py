from stylesweep.errors import SyntaxValidationError
from stylesweep.validation.rules import DIALECT_RULES, DialectRules, SourceLine
from stylesweep.validation.validator import validate, validate_or_raise

__all__ = [
    "validate",
    "validate_or_raise",
    "SyntaxValidationError",
    "DIALECT_RULES",
    "DialectRules",
    "SourceLine",
]
