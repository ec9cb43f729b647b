import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

import torch

from tinytok.local_tokenizers.vocabulary import Vocabulary, PAD_ID, UNK_ID

logger = logging.getLogger(__name__)

# Marks that glue onto the NEXT token, e.g. "(" + "word" -> "(word"
OPENING_PUNCTUATION = ("(", "[", "{", "\"", "'")
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
# ASCII whitespace only: NBSP and other Unicode spaces are part of an entry, not separators
ASCII_WS = " \t\n\x0b\f\r"
SEPARATOR_PATTERN = re.compile(r"[ \t\n\x0b\f\r]+")
# ids are 32-bit signed ints; anything outside is not a valid id literal
MIN_ID, MAX_ID = -2**31, 2**31 - 1


def is_punctuation(token: str) -> bool:
    return len(token) == 1 and not token.isalnum()


def is_opening_punctuation(token: str) -> bool:
    return token in OPENING_PUNCTUATION


def split_ids(ids_string: Optional[str]) -> List[str]:
    stripped = (ids_string or "").strip(ASCII_WS)
    if not stripped:
        return []
    return SEPARATOR_PATTERN.split(stripped)


def parse_id(part: str) -> Optional[int]:
    if INT_PATTERN.fullmatch(part) is None:
        return None
    idx = int(part)
    if not MIN_ID <= idx <= MAX_ID:
        return None
    return idx


@dataclass(frozen=True)
class IdAnnotation:
    """One entry of a decode request: the raw text, its parsed id (None if not a number) and the resolved token."""
    raw: str
    idx: Optional[int]
    token: Optional[str]
    marker: str

    def render(self) -> str:
        if self.idx is None:
            return f"  '{self.raw}' → [INVALID - not a number]"
        return f"  {self.idx} → '{self.token}'{self.marker}"


class Decoder:
    """ids -> text, re-inserting spaces with a punctuation-aware heuristic.

    Lossy by construction: casing is gone after tokenize and original spacing
    is approximated, not recovered.
    """
    def __init__(self, vocab: Vocabulary):
        self.vocab = vocab

    def decode(self, ids: Union[Iterable[int], torch.Tensor]) -> str:
        if isinstance(ids, torch.Tensor):
            ids = ids.tolist()
        parts: List[str] = []
        prev: Optional[str] = None
        for idx in ids:
            # PAD is structural only: no output, and it does not become `prev`
            if idx == PAD_ID:
                continue
            tok = self.vocab.token(idx)
            if prev is not None and not is_opening_punctuation(prev) and not is_punctuation(tok):
                # word after word, or word after closing punctuation ("end. start")
                parts.append(" ")
            parts.append(tok)
            prev = tok
        return "".join(parts).strip()

    def parse_ids(self, ids_string: Optional[str]) -> List[int]:
        ids: List[int] = []
        for part in split_ids(ids_string):
            idx = parse_id(part)
            if idx is None:
                logger.warning("Invalid ID '%s' - skipping", part)
                continue
            ids.append(idx)
        return ids

    def decode_from_string(self, ids_string: Optional[str]) -> str:
        if not split_ids(ids_string):
            return ""
        return self.decode(self.parse_ids(ids_string))

    def annotate(self, ids_string: Optional[str]) -> List[IdAnnotation]:
        rows: List[IdAnnotation] = []
        for part in split_ids(ids_string):
            idx = parse_id(part)
            if idx is None:
                rows.append(IdAnnotation(raw=part, idx=None, token=None, marker=""))
                continue
            if idx == PAD_ID:
                marker = " [PAD]"
            elif idx == UNK_ID:
                marker = " [UNK]"
            elif not self.vocab.contains_id(idx):
                marker = " [INVALID]"
            else:
                marker = ""
            rows.append(IdAnnotation(raw=part, idx=idx, token=self.vocab.token(idx), marker=marker))
        return rows

    def decode_with_details(self, ids_string: Optional[str]) -> str:
        if not split_ids(ids_string):
            return "No IDs provided"
        rows = self.annotate(ids_string)
        valid_ids = [row.idx for row in rows if row.idx is not None]
        lines = ["ID → Token mapping:"]
        lines.extend(row.render() for row in rows)
        lines.append("")
        lines.append(f"Decoded text: {self.decode(valid_ids)}")
        return "\n".join(lines)
