"""Parser for the ``prefix(key): value`` call syntax.

The key ends at the first ``)`` that is not escaped with a backslash and that
closing paren must be followed directly by ``:``. Keys may therefore contain
escaped parens and markup characters such as ``<``, ``!`` or ``[``.
"""

from typing import NamedTuple

ESCAPE_CHAR = "\\"


class CallResult(NamedTuple):
    """Key and value recovered from a call line."""

    key: str
    value: str


NO_MATCH = CallResult("", "")


def parse_call(prefix: str, line: str) -> CallResult:
    """
    Parse a line of the form ``prefix(key): value``.

    Args:
        prefix: Directive name expected before the opening paren
        line: The line to parse

    Returns:
        The parsed key and the untrimmed value, or NO_MATCH when the line is
        not a well formed call for this prefix
    """
    opening = prefix + "("
    if not line.startswith(opening):
        return NO_MATCH

    rest = line[len(opening) :]
    key_chars: list[str] = []
    last_char = ""
    closing_index = -1

    for index, char in enumerate(rest):
        if char == ")" and last_char != ESCAPE_CHAR:
            closing_index = index
            break
        # The escape marker itself never ends up in the key
        escapes_paren = char == ESCAPE_CHAR and rest[index + 1 : index + 2] == ")"
        if not escapes_paren:
            key_chars.append(char)
        last_char = char

    if closing_index == -1:
        return NO_MATCH

    # No backtracking: the first unescaped paren must be followed by the colon
    if rest[closing_index + 1 : closing_index + 2] != ":":
        return NO_MATCH

    return CallResult("".join(key_chars), rest[closing_index + 2 :])
