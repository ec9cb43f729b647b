from typing import List, Optional, Sequence

import torch
from torch import Tensor

from tinytok.local_tokenizers.encoder import Encoder
from tinytok.local_tokenizers.vocabulary import PAD_ID


def pad_batch(seqs: Sequence[Sequence[int]], block_size: Optional[int] = None) -> Tensor:
    """Right-pad id sequences with <PAD> into a (B, T) long tensor.

    T is the longest sequence, or block_size when given (longer rows are truncated).
    """
    if not seqs:
        raise ValueError("pad_batch needs at least one sequence")
    T = block_size if block_size is not None else max(len(s) for s in seqs)
    if T <= 0:
        raise ValueError(f"block_size must be positive, got {T}")
    out = torch.full((len(seqs), T), PAD_ID, dtype=torch.long)
    for b, seq in enumerate(seqs):
        row = list(seq)[:T]
        if row:
            out[b, :len(row)] = torch.tensor(row, dtype=torch.long)
    return out


def encode_batch(texts: List[str], encoder: Encoder, block_size: Optional[int] = None) -> Tensor:
    return pad_batch([encoder.encode(t) for t in texts], block_size=block_size)
