from typing import Dict, Iterable

PAD_TOKEN = "<PAD>"
PAD_ID = 0
UNK_TOKEN = "<UNK>"
UNK_ID = 1


class Vocabulary:
    """Bidirectional token <-> id table.

    stoi and itos are kept as mutual inverses: the only mutation path is
    add_token, which inserts into both dicts at once. Ids are handed out in
    insertion order, so <PAD>=0 and <UNK>=1 are seeded first and the first
    corpus token gets 2.
    """
    def __init__(self):
        self.stoi: Dict[str, int] = {}
        self.itos: Dict[int, str] = {}
        self.add_token(PAD_TOKEN)
        self.add_token(UNK_TOKEN)

    def add_token(self, token: str) -> int:
        idx = self.stoi.get(token)
        if idx is not None:
            return idx
        idx = len(self.stoi)  # ids are dense, so size == next id
        self.stoi[token] = idx
        self.itos[idx] = token
        return idx

    def add_tokens(self, tokens: Iterable[str]) -> None:
        for tok in tokens:
            self.add_token(tok)

    def token_id(self, token: str) -> int:
        return self.stoi.get(token, UNK_ID)

    def token(self, idx: int) -> str:
        return self.itos.get(idx, UNK_TOKEN)

    def contains_token(self, token: str) -> bool:
        return token in self.stoi

    def contains_id(self, idx: int) -> bool:
        return idx in self.itos

    def size(self) -> int:
        return len(self.stoi)

    def stats(self) -> str:
        return f"Vocabulary size: {self.size()} tokens (including {PAD_TOKEN} and {UNK_TOKEN})"

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, token: str) -> bool:
        return self.contains_token(token)
