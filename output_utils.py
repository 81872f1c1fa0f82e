"""
Output utilities for MtgDeck2Pdf.
"""

import os
import subprocess
import sys
from typing import List, Optional

def pdf_path_for_deck_list(deck_list_path: str) -> str:
    """'decks/tayam.txt' -> 'decks/tayam.pdf'"""
    base, _ = os.path.splitext(deck_list_path)
    return f"{base}.pdf"

def document_title_for_deck_list(deck_list_path: str) -> str:
    return os.path.splitext(os.path.basename(deck_list_path))[0]

def write_missing_cards_file(deck_list_path: str, missing_cards: List[str]) -> Optional[str]:
    """Writes <deck list name>_missing.txt next to the deck list. Returns its path, or None if nothing is missing."""
    if not missing_cards: return None
    deck_list_dir = os.path.dirname(deck_list_path)
    deck_list_basename_no_ext = os.path.splitext(os.path.basename(deck_list_path))[0]
    missing_filename = f"{deck_list_basename_no_ext}_missing.txt"
    missing_filepath = os.path.join(deck_list_dir, missing_filename) if deck_list_dir else missing_filename
    try:
        with open(missing_filepath, 'w', encoding='utf-8') as f:
            for card_name in missing_cards: f.write(f"{card_name}\n")
    except OSError as e:
        print(f"Error writing missing cards file '{missing_filepath}': {e}")
        return None
    print(f"List of missing cards saved to: {missing_filepath}")
    return missing_filepath

def open_file_in_explorer(file_path: str):
    """Opens file_path with the platform's default viewer."""
    if sys.platform.startswith("linux"): command = ["xdg-open", file_path]
    elif sys.platform == "darwin": command = ["open", file_path]
    elif sys.platform == "win32": command = ["explorer", file_path]
    else:
        print(f"Warning: Don't know how to open files on '{sys.platform}'. PDF is at {file_path}")
        return
    try: subprocess.Popen(command)
    except OSError as e: print(f"Warning: Could not open '{file_path}': {e}")
