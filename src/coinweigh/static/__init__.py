from .ternary import saturated_size, digit, digits, from_digits, complement, mcomplement, is_free, missing
from .codes import (
    build_base,
    add_one,
    weigh_static,
    solve_static,
    static_weighings,
    outcome_code,
    lookup_table,
    decode_outcome,
)

__all__ = [
    "saturated_size",
    "digit",
    "digits",
    "from_digits",
    "complement",
    "mcomplement",
    "is_free",
    "missing",
    "build_base",
    "add_one",
    "weigh_static",
    "solve_static",
    "static_weighings",
    "outcome_code",
    "lookup_table",
    "decode_outcome",
]
