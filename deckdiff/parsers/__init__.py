from deckdiff.parsers.deck_list import (
    ParsedLine,
    iter_parsed_lines,
    parse_deck_list,
    parse_line,
)

__all__ = [
    "ParsedLine",
    "iter_parsed_lines",
    "parse_deck_list",
    "parse_line",
]
