from .document_checks import add_months, check_actual, check_format

__all__ = [
    "add_months",
    "check_actual",
    "check_format",
]
