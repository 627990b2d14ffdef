"""
Identifier parser for raw, possibly qualified and quoted, object names.

A name is one token or several tokens joined by single dots. A token is
either quoted with a pair of delimiters (`...`, "..." or [...]) or a bare
run of characters without whitespace, dots, quotes or brackets. There is no
escape mechanism for a delimiter inside a quoted token.
"""

import re
from dataclasses import dataclass

from schema.errors import ParseError, TooManyQualifiers

# Opening delimiter -> closing delimiter
QUOTE_PAIRS = {
    "`": "`",
    '"': '"',
    "[": "]",
}

QUOTE_CHARACTERS = "`\"[]"

_BARE_TOKEN = re.compile(r"[^\s.`\"\[\]]+")


@dataclass(frozen=True)
class Segment:
    """One dot-separated piece of a raw name."""

    value: str
    quoted: bool = False


def _read_token(raw: str, position: int) -> tuple[Segment, int]:
    """Read a single token starting at position, returning it and the next position."""
    if position >= len(raw):
        raise ParseError(raw, position, "expected an identifier, got end of input")

    opening = raw[position]
    if opening in QUOTE_PAIRS:
        closing = QUOTE_PAIRS[opening]
        end = raw.find(closing, position + 1)
        if end == -1:
            raise ParseError(raw, position, f"unterminated quoted identifier, missing {closing}")
        if end == position + 1:
            raise ParseError(raw, position, "empty quoted identifier")
        return Segment(raw[position + 1:end], quoted=True), end + 1

    match = _BARE_TOKEN.match(raw, position)
    if match is None:
        raise ParseError(raw, position, f"unexpected character {raw[position]!r}")

    return Segment(match.group()), match.end()


def parse(raw: str) -> list[Segment]:
    """
    Tokenize a raw name into its dot-separated segments.

    The grammar accepts any number of segments; use parse_name() to also
    enforce the namespace.local limit.

    Raises:
        ParseError: if the input does not match the identifier grammar
    """
    if raw == "":
        return []

    segments = []
    position = 0

    while True:
        segment, position = _read_token(raw, position)
        segments.append(segment)

        if position == len(raw):
            return segments

        if raw[position] != ".":
            raise ParseError(raw, position, f"expected '.' or end of input, got {raw[position]!r}")

        position += 1


def parse_name(raw: str) -> list[Segment]:
    """
    Parse a raw name into at most two segments: [local] or [namespace, local].

    Raises:
        ParseError: if the input does not match the identifier grammar
        TooManyQualifiers: if the input has more than one qualifier
    """
    segments = parse(raw)

    if len(segments) > 2:
        raise TooManyQualifiers(raw, len(segments) - 1)

    return segments


def strip_quotes(name: str) -> str:
    """Remove every quote and bracket character from a name."""
    return name.translate(str.maketrans("", "", QUOTE_CHARACTERS))
