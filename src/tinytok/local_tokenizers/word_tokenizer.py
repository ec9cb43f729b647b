import re
from typing import List, Optional

# Word-level tokenizer: every tokenizer contains the rule of how to break words and sentences
# Rule: a run of ASCII letters, a run of ASCII digits, or one punctuation char.
# Everything else (whitespace, other symbols, non-ASCII) is dropped.
PUNCTUATION = ".,!?;:\"'()[]{}-"
TOKEN_PATTERN = re.compile(r"[a-z]+|[0-9]+|[.,!?;:\"'()\[\]{}\-]")


def tokenize(text: Optional[str]) -> List[str]:
    if not text:
        return []
    # NOTE: lowercase before matching, so "Hello" and "hello" share one vocab entry
    return TOKEN_PATTERN.findall(text.lower())


def tokenize_and_format(text: Optional[str]) -> str:
    return " | ".join(tokenize(text))


class WordTokenizer:
    """Stateless wrapper so the encoder can be composed with a tokenizer object."""
    def tokenize(self, text: Optional[str]) -> List[str]:
        return tokenize(text)

    def tokenize_and_format(self, text: Optional[str]) -> str:
        return tokenize_and_format(text)
