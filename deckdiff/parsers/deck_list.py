"""
Parser for free-form deck lists.

Line format:
    <quantity>[x] <card name> [(<set_code>) [<collector_number>]] [[<category>, ...]]

Example:
    1x Atraxa, Praetors' Voice [Commander]
    2x Blasphemous Act (eoc) 86 [Removal]
    4 Lightning Bolt

Blank lines and lines starting with "#" or "//" are skipped.

Every line is parsed independently. A malformed line becomes a ParseError
carrying its 1-indexed line number; the remaining lines still parse.
"""

import re
from collections.abc import Iterator

from deckdiff.models.deck import DeckParseResult, ParsedEntry, ParseError

# "4", "4x", "4X": one to nine ASCII digits
QUANTITY_PATTERN = re.compile(r"^([0-9]{1,9})[xX]?$")

COMMENT_PREFIXES = ("#", "//")

ParsedLine = ParsedEntry | ParseError


def _split_categories(text: str) -> tuple[str, tuple[str, ...]] | str:
    """
    Split a trailing "[a, b]" block off the end of the line.

    Returns (remaining text, categories) or an error message.
    """
    open_idx = text.find("[")
    close_idx = text.find("]")

    if open_idx == -1:
        if close_idx != -1:
            return f"Unbalanced bracket: unexpected ']' in '{text}'"
        return text, ()

    if close_idx == -1:
        return f"Unbalanced bracket: missing ']' in '{text[open_idx:]}'"
    if close_idx < open_idx:
        return f"Unbalanced bracket: unexpected ']' in '{text[:open_idx]}'"

    inner = text[open_idx + 1 : close_idx]
    if "[" in inner:
        return f"Unbalanced bracket: nested '[' in '{text[open_idx : close_idx + 1]}'"

    trailing = text[close_idx + 1 :].strip()
    if trailing:
        return f"Unexpected text after categories: '{trailing}'"

    # Empty tags after trimming are dropped
    categories = tuple(tag.strip() for tag in inner.split(",") if tag.strip())
    return text[:open_idx].strip(), categories


def _split_set_info(text: str) -> tuple[str, str | None, str | None] | str:
    """
    Split "(set) number" off the end of the card name.

    Returns (card name, set code, collector number) or an error message.
    """
    open_idx = text.find("(")
    close_idx = text.find(")")

    if open_idx == -1:
        if close_idx != -1:
            return f"Unbalanced parenthesis: unexpected ')' in '{text}'"
        return text, None, None

    if close_idx == -1:
        return f"Unbalanced parenthesis: missing ')' in '{text[open_idx:]}'"
    if close_idx < open_idx:
        return f"Unbalanced parenthesis: unexpected ')' in '{text[:open_idx]}'"

    token = text[open_idx : close_idx + 1]
    set_code = text[open_idx + 1 : close_idx].strip()
    if "(" in set_code:
        return f"Unbalanced parenthesis: nested '(' in '{token}'"
    if not set_code:
        return f"Empty set code in '{token}'"

    tail = text[close_idx + 1 :].strip()
    if "(" in tail or ")" in tail:
        return f"Unbalanced parenthesis: unexpected '{tail}' after '{token}'"

    # Collector numbers are a single token ("86", "290a", "p12")
    if len(tail.split()) > 1:
        return f"Unexpected text after collector number: '{tail}'"

    return text[:open_idx].strip(), set_code, tail or None


def parse_line(line: str, line_number: int) -> ParsedLine | None:
    """
    Parse a single deck-list line.

    Args:
        line: Raw line text
        line_number: 1-indexed position of the line in its deck list

    Returns:
        ParsedEntry on success, ParseError on malformed input,
        None for blank and comment lines.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIXES):
        return None

    raw = line.rstrip("\r\n")

    parts = stripped.split(None, 1)
    quantity_token = parts[0]
    match = QUANTITY_PATTERN.match(quantity_token)
    if match is None:
        return ParseError(line_number, raw, f"Invalid quantity '{quantity_token}'")

    quantity = int(match.group(1))
    if quantity < 1:
        return ParseError(
            line_number, raw, f"Invalid quantity '{quantity_token}': must be at least 1"
        )

    rest = parts[1] if len(parts) > 1 else ""

    categories_result = _split_categories(rest)
    if isinstance(categories_result, str):
        return ParseError(line_number, raw, categories_result)
    body, categories = categories_result

    set_result = _split_set_info(body)
    if isinstance(set_result, str):
        return ParseError(line_number, raw, set_result)
    card_name, set_code, collector_number = set_result

    if not card_name:
        return ParseError(line_number, raw, "Empty card name")

    return ParsedEntry(
        quantity=quantity,
        card_name=card_name,
        set_code=set_code,
        collector_number=collector_number,
        categories=categories,
        line_number=line_number,
    )


def iter_parsed_lines(text: str) -> Iterator[ParsedLine]:
    """
    Yield one result per non-skipped line, in line order.

    Line numbers count every line of the input, including skipped ones.
    """
    for line_number, line in enumerate(text.split("\n"), start=1):
        result = parse_line(line, line_number)
        if result is not None:
            yield result


def parse_deck_list(text: str) -> DeckParseResult:
    """
    Parse a full deck list into entries and per-line errors.

    Args:
        text: Raw deck-list text (clipboard paste)

    Returns:
        DeckParseResult. Entries keep first-appearance order and are not
        merged; a card listed on two lines yields two entries.
    """
    entries: list[ParsedEntry] = []
    errors: list[ParseError] = []

    for result in iter_parsed_lines(text):
        if isinstance(result, ParseError):
            errors.append(result)
        else:
            entries.append(result)

    return DeckParseResult(entries=tuple(entries), errors=tuple(errors))
