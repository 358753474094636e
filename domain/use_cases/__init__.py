from .estimate_protein import estimate, is_invalid
from .parse_input import parse_number, parse_weight
from .present_result import (
    PLACEHOLDER,
    factor_label,
    factor_note,
    format_number,
    format_report,
    format_summary,
    result_card,
)

__all__ = [
    "PLACEHOLDER",
    "estimate",
    "factor_label",
    "factor_note",
    "format_number",
    "format_report",
    "format_summary",
    "is_invalid",
    "parse_number",
    "parse_weight",
    "result_card",
]
