# src/tinytok/__init__.py

# Expose key modules/classes at the package level for easier imports
from tinytok.local_tokenizers import word_tokenizer, vocabulary, encoder, decoder
from tinytok.data_loaders import corpus_loader, batching
from tinytok.local_tokenizers.vocabulary import Vocabulary, PAD_ID, PAD_TOKEN, UNK_ID, UNK_TOKEN
from tinytok.local_tokenizers.encoder import Encoder
from tinytok.local_tokenizers.decoder import Decoder
from tinytok.data_loaders.batching import pad_batch, encode_batch
from tinytok.pipeline.text_pipeline import TextPipeline

# matches pyproject.toml
__version__ = "0.1.0"
