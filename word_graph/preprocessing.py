from __future__ import annotations
import re
import string
from dataclasses import dataclass
from typing import List, Optional

from .config import VIRTUAL_DOCUMENT_WINDOW

RE_NON_LETTER = re.compile(r'[^A-Za-z]+')
# ASCII punctuation plus line breaks become word separators while building
_SEPARATORS = str.maketrans({ch: ' ' for ch in string.punctuation + '\n\r'})

@dataclass
class PreprocessConfig:
    virtual_document_window: int = VIRTUAL_DOCUMENT_WINDOW
    split_single_line: bool = True  # cut a one-line text into virtual documents

def normalize_word(token: str) -> str:
    # "Don't!" -> "dont"; may be empty, callers skip those
    return RE_NON_LETTER.sub('', token).lower()

def tokenize(text: str) -> List[str]:
    """Words of a text as they become graph vertices, in reading order."""
    toks = (normalize_word(t) for t in text.translate(_SEPARATORS).split())
    return [t for t in toks if t]

def split_words(text: str) -> List[str]:
    """Whitespace split + normalization, punctuation inside a token is dropped."""
    toks = (normalize_word(t) for t in text.split())
    return [t for t in toks if t]

def split_documents(text: str, cfg: Optional[PreprocessConfig] = None) -> List[List[str]]:
    """
    Token lists for the "documents" of a raw text.

    Every non-empty line is one document. A text with a single line is cut
    into windows of ``cfg.virtual_document_window`` tokens so that document
    frequency has something to count; this is a heuristic, a blank line in
    the wrong place changes the statistics.
    """
    cfg = cfg or PreprocessConfig()
    lines = [line for line in text.splitlines() if line]
    if len(lines) == 1 and cfg.split_single_line:
        tokens = tokenize(lines[0])
        size = max(1, cfg.virtual_document_window)
        return [tokens[i:i + size] for i in range(0, len(tokens), size)]
    return [tokenize(line) for line in lines]
