from typing import List, Optional

from tinytok.local_tokenizers.vocabulary import Vocabulary, UNK_ID
from tinytok.local_tokenizers.word_tokenizer import WordTokenizer


class Encoder:
    """text -> ids. Unseen tokens map to <UNK> (id 1); the original word is lost."""
    def __init__(self, tokenizer: WordTokenizer, vocab: Vocabulary):
        self.tokenizer = tokenizer
        self.vocab = vocab

    def encode(self, text: Optional[str]) -> List[int]:
        return [self.vocab.token_id(tok) for tok in self.tokenizer.tokenize(text)]

    def encode_with_details(self, text: Optional[str]) -> str:
        tokens = self.tokenizer.tokenize(text)
        ids = [self.vocab.token_id(tok) for tok in tokens]
        lines = [
            f"Tokens: [{', '.join(tokens)}]",
            f"IDs:    [{', '.join(str(i) for i in ids)}]",
            "",
            "Token → ID mapping:",
        ]
        for tok, idx in zip(tokens, ids):
            marker = " [UNKNOWN]" if idx == UNK_ID else ""
            lines.append(f"  '{tok}' → {idx}{marker}")
        return "\n".join(lines) + "\n"

    def encode_to_string(self, text: Optional[str]) -> str:
        return " ".join(str(idx) for idx in self.encode(text))
