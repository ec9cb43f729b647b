import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, TypedDict

from tqdm import tqdm

from tinytok.local_tokenizers.decoder import Decoder, IdAnnotation
from tinytok.local_tokenizers.encoder import Encoder
from tinytok.local_tokenizers.vocabulary import Vocabulary
from tinytok.local_tokenizers.word_tokenizer import WordTokenizer

logger = logging.getLogger(__name__)


class TrainingStats(TypedDict):
    total_tokens: int
    vocab_size: int
    tokens_per_corpus: List[int]


@dataclass(frozen=True)
class EncodeResult:
    tokens: List[str]
    ids: List[int]
    details: str
    ids_text: str


@dataclass(frozen=True)
class DecodeResult:
    annotations: List[IdAnnotation]
    text: str
    details: str


class TextPipeline:
    """Tokenizer + Vocabulary + Encoder/Decoder wired together.

    train() is the only write path into the vocabulary; call it before serving
    encode/decode requests and treat the vocabulary as read-only afterwards.
    """
    def __init__(self, vocab: Optional[Vocabulary] = None, show_progress: bool = False):
        self.tokenizer = WordTokenizer()
        self.vocab = vocab if vocab is not None else Vocabulary()
        self.encoder = Encoder(self.tokenizer, self.vocab)
        self.decoder = Decoder(self.vocab)
        self.show_progress = show_progress

    def train(self, corpus_texts: Sequence[str], names: Optional[Sequence[str]] = None) -> TrainingStats:
        counts: List[int] = []
        for i, text in enumerate(tqdm(corpus_texts, desc="building vocab", unit="corpus",
                                      disable=not self.show_progress)):
            tokens = self.tokenizer.tokenize(text)
            self.vocab.add_tokens(tokens)
            counts.append(len(tokens))
            name = names[i] if names is not None else f"corpus[{i}]"
            logger.info("%s: tokens extracted: %d", name, len(tokens))
        stats: TrainingStats = {
            "total_tokens": sum(counts),
            "vocab_size": self.vocab.size(),
            "tokens_per_corpus": counts,
        }
        logger.info("Total tokens processed: %s | %s", f"{stats['total_tokens']:,}", self.vocab.stats())
        return stats

    def encode_request(self, text: str) -> EncodeResult:
        tokens = self.tokenizer.tokenize(text)
        ids = self.encoder.encode(text)
        return EncodeResult(
            tokens=tokens,
            ids=ids,
            details=self.encoder.encode_with_details(text),
            ids_text=" ".join(str(i) for i in ids),
        )

    def decode_request(self, ids_text: str) -> DecodeResult:
        return DecodeResult(
            annotations=self.decoder.annotate(ids_text),
            text=self.decoder.decode_from_string(ids_text),
            details=self.decoder.decode_with_details(ids_text),
        )
