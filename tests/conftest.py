# tests/conftest.py
from __future__ import annotations
import pytest
from dataclasses import dataclass

from tinytok.configs.config import BookSource, CorpusConfig
from tinytok.local_tokenizers.decoder import Decoder
from tinytok.local_tokenizers.encoder import Encoder
from tinytok.local_tokenizers.vocabulary import Vocabulary
from tinytok.local_tokenizers.word_tokenizer import WordTokenizer, tokenize


# --- Vocabularies ------------------------------------------------------------

@pytest.fixture
def vocab() -> Vocabulary:
    return Vocabulary()

@pytest.fixture
def cat_vocab() -> Vocabulary:
    # "the"=2, "cat"=3, "sat"=4
    v = Vocabulary()
    v.add_tokens(tokenize("the cat sat"))
    return v

@pytest.fixture
def punct_vocab() -> Vocabulary:
    # "hello"=2 "world"=3 ","=4 "!"=5 "("=6 ")"=7 "end"=8 "."=9 "start"=10 "\""=11
    v = Vocabulary()
    v.add_tokens(["hello", "world", ",", "!", "(", ")", "end", ".", "start", "\""])
    return v


# --- Encoder / decoder factories ---------------------------------------------

@dataclass
class Codec:
    vocab: Vocabulary
    encoder: Encoder
    decoder: Decoder

@pytest.fixture
def make_codec():
    def _make(v: Vocabulary) -> Codec:
        return Codec(vocab=v, encoder=Encoder(WordTokenizer(), v), decoder=Decoder(v))
    return _make

@pytest.fixture
def cat_codec(make_codec, cat_vocab) -> Codec:
    return make_codec(cat_vocab)


# --- IO helpers --------------------------------------------------------------

@pytest.fixture
def tmp_data_dir(tmp_path):
    d = tmp_path / "data"
    d.mkdir()
    return d

@pytest.fixture
def tiny_book() -> BookSource:
    return BookSource("Tiny Book", "https://example.org/tiny.txt", "tiny.txt")

@pytest.fixture
def corpus_config(tmp_data_dir, tiny_book) -> CorpusConfig:
    return CorpusConfig(data_dir=tmp_data_dir, books=(tiny_book,))

@pytest.fixture
def gutenberg_text() -> str:
    return (
        "The Project Gutenberg eBook of Tiny Book\n"
        "License blah blah.\n"
        "*** START OF THE PROJECT GUTENBERG EBOOK TINY BOOK ***\n"
        "The cat sat on the mat.\n"
        "*** END OF THE PROJECT GUTENBERG EBOOK TINY BOOK ***\n"
        "Terms of use, Gutenberg license.\n"
    )
