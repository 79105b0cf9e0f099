"""
Number conversion helpers shared by the tokenizer and the table parsers
"""

from typing import Optional


def to_float(token: str) -> Optional[float]:
    """Convert a token to float, or return None if it is not a number

    Accepts Fortran double precision exponents (1.5D+03) as written by the
    simulation tools. Python-only spellings such as digit underscores are
    rejected so that identifiers like ``1_a`` stay text.
    """
    text = token.strip()
    if not text or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        pass
    if "d" in text.lower():
        try:
            return float(text.lower().replace("d", "e", 1))
        except ValueError:
            return None
    return None


def is_number(token: str) -> bool:
    return to_float(token) is not None
