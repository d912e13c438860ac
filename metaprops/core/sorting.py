"""
Deterministic ordering of property rows
"""

from typing import Iterable, List, Tuple

from .models import PropertyRow


def ordinal_fold(text: str) -> str:
    """Upper-case each code point for ordinal, locale independent comparison.

    Characters whose upper-case form is longer than one character (for
    example 'ß') are kept as they are.
    """
    folded = []
    for char in text:
        upper = char.upper()
        folded.append(upper if len(upper) == 1 else char)
    return "".join(folded)


def row_sort_key(row: PropertyRow) -> Tuple[str, str]:
    return ordinal_fold(row.canonical_name), ordinal_fold(row.display_name)


def sort_rows(rows: Iterable[PropertyRow]) -> List[PropertyRow]:
    """Sort rows by canonical name, then display name, ignoring case.

    The sort is stable: rows equal on both names keep their collection order.
    """
    return sorted(rows, key=row_sort_key)
