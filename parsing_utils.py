"""
Parsing utilities for MtgDeck2Pdf.
"""

import re
from typing import Iterable, List, NamedTuple, Optional, Tuple

# Data structure for a parsed deck list line
class DecklistEntry(NamedTuple):
    card_name: str
    set_code: Optional[str] = None
    line_num: int = 0
    original_line: str = ""

class ParsedDecklist(NamedTuple):
    entries: List[DecklistEntry]
    skipped_lines: List[Tuple[int, str]]

# "1 Tayam, Luminous Enigma (C20)": everything between the count and the last " (" is the name.
CARD_WITH_SET_RE = re.compile(r"\d (.*) \(")
# "1 Tayam, Luminous Enigma": everything after the count is the name.
CARD_WITHOUT_SET_RE = re.compile(r"\d (.*)")
SET_CODE_RE = re.compile(r"\(([a-zA-Z0-9]*)\)")

def parse_decklist_line(line: str, line_num: int = 0) -> Optional[DecklistEntry]:
    """Parses one deck list line, returning None when it matches no known format."""
    # Choose the name pattern based on the presence of a set code parenthesis
    card_pattern = CARD_WITH_SET_RE if "(" in line else CARD_WITHOUT_SET_RE
    card_match = card_pattern.search(line)
    if not card_match:
        return None
    card_name = card_match.group(1).strip()
    if not card_name:
        return None

    set_match = SET_CODE_RE.search(line)
    set_code = set_match.group(1) if set_match and set_match.group(1) else None
    return DecklistEntry(
        card_name=card_name,
        set_code=set_code,
        line_num=line_num,
        original_line=line.rstrip("\r\n"),
    )

def parse_decklist(lines: Iterable[str], debug: bool = False) -> ParsedDecklist:
    """
    Parses deck list lines in order. Lines that match no format are reported
    and skipped; they never abort parsing. Duplicate cards are kept.
    """
    entries: List[DecklistEntry] = []
    skipped: List[Tuple[int, str]] = []
    for line_num, raw_line in enumerate(lines, 1):
        line = raw_line.rstrip("\r\n")
        entry = parse_decklist_line(line, line_num)
        if entry is None:
            skipped.append((line_num, line))
            if line.strip():
                print(f"  Warning: Skipped line {line_num} - '{line.strip()}'")
            elif debug:
                print(f"DEBUG: Skipping empty line {line_num}.")
            continue
        if debug:
            set_str = f" from set '{entry.set_code}'" if entry.set_code else ""
            print(f"DEBUG: Line {line_num}: '{entry.card_name}'{set_str}")
        entries.append(entry)
    return ParsedDecklist(entries=entries, skipped_lines=skipped)

def read_decklist(deck_list_path: str, debug: bool = False) -> ParsedDecklist:
    """Reads and parses a UTF-8 deck list file. Raises OSError if it cannot be read."""
    if debug: print(f"DEBUG: Reading deck list '{deck_list_path}'")
    try:
        with open(deck_list_path, 'r', encoding='utf-8-sig') as f:
            return parse_decklist(f, debug=debug)
    except UnicodeDecodeError as e:
        raise OSError(f"Deck list '{deck_list_path}' is not valid UTF-8: {e}") from e
