"""
Line tokenizer for FAST input decks

Turns one raw line of a deck into a RawRecord:

    90.0   TipRad   - The tip radius (m)
    ^value ^label     ^descr

Also provides the quote-aware token splitting shared with the table parsers.
"""

import re
from typing import List, Optional, Tuple

from ..core.models import FieldType, RawRecord
from ..utils.numbers import is_number

# A double or single quoted run (may contain spaces) or a bare word
_TOKEN = re.compile(r'"[^"]*"|\'[^\']*\'|\S+')

# Leading characters of a first token that mark a comment or section divider
COMMENT_STARTS = ("#", "!", "-", "=")

LOGICAL_WORDS = {"true", "false", "t", "f"}


def split_tokens(line: str, limit: Optional[int] = None) -> List[str]:
    """Split on whitespace, keeping quoted tokens whole (quotes retained)"""
    tokens = []
    for match in _TOKEN.finditer(line):
        tokens.append(match.group(0))
        if limit is not None and len(tokens) >= limit:
            break
    return tokens


def first_token(line: str) -> Tuple[Optional[str], int]:
    """Return the first token and the index just past it

    Returns (None, 0) for a blank line.
    """
    match = _TOKEN.search(line)
    if match is None:
        return None, 0
    return match.group(0), match.end()


def unquote(token: str) -> str:
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "\"'":
        return token[1:-1]
    return token


class LineTokenizer:
    """Default tokenizer for scalar record lines

    Any callable taking a line and returning a RawRecord can replace it in
    FastParser.
    """

    def __call__(self, line: str) -> RawRecord:
        return self.tokenize(line)

    def tokenize(self, line: str) -> RawRecord:
        text = line.strip()
        token, end = first_token(text)

        if token is None or self._is_comment(token):
            return RawRecord(value="", label="", is_comment=True, descr=text,
                             field_type=FieldType.COMMENT)

        value, field_type = self._classify(token)

        rest = text[end:]
        label, label_end = first_token(rest)
        if label is None:
            return RawRecord(value=value, label="", is_comment=False, field_type=field_type)

        descr = rest[label_end:].strip()
        if descr.startswith("-"):
            descr = descr[1:].strip()

        return RawRecord(value=value, label=label, is_comment=False, descr=descr,
                         field_type=field_type)

    @staticmethod
    def _is_comment(token: str) -> bool:
        # "-1.5" is a value, "-----" is a divider
        return token.startswith(COMMENT_STARTS) and not is_number(token)

    @staticmethod
    def _classify(token: str) -> Tuple[str, FieldType]:
        if is_number(token):
            return token, FieldType.NUMERIC
        if token.lower() in LOGICAL_WORDS:
            return token, FieldType.LOGICAL
        # Strings are reported in double quotes so table headers read as "HtFract"
        return f'"{unquote(token)}"', FieldType.CHARACTER
