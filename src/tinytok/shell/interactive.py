import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

import requests

from tinytok.configs.config import AppConfig, CorpusConfig
from tinytok.data_loaders.corpus_loader import CorpusError, fetch_corpus
from tinytok.logger.setup_logger import setup_logger
from tinytok.pipeline.text_pipeline import TextPipeline

logger = logging.getLogger("tinytok.shell.interactive")

BANNER = """\
╔══════════════════════════════════════════════════════════════╗
║           TEXT TOKENIZER WITH ENCODER/DECODER                ║
╚══════════════════════════════════════════════════════════════╝"""

MENU = """\
┌──────────────────────────────────────────────────────────────┐
│                         MENU                                 │
├──────────────────────────────────────────────────────────────┤
│  1. Encode text to token IDs                                 │
│  2. Decode token IDs to text                                 │
│  3. Exit                                                     │
└──────────────────────────────────────────────────────────────┘"""

RULE = "═" * 64


class _EndOfInput(Exception):
    pass


def _read(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        raise _EndOfInput from None


def build_pipeline(corpus_cfg: CorpusConfig, app_cfg: AppConfig) -> TextPipeline:
    """Fetch every configured book and train one shared vocabulary on them.

    Raises on any acquisition failure; there is no partial vocabulary.
    """
    print(BANNER)
    print()
    print("Downloading and processing eBooks from Project Gutenberg...")
    print()
    texts = [fetch_corpus(book, corpus_cfg) for book in corpus_cfg.books]
    pipeline = TextPipeline(show_progress=app_cfg.show_progress)
    stats = pipeline.train(texts, names=[book.title for book in corpus_cfg.books])

    print(RULE)
    print(f"✓ Total tokens processed: {stats['total_tokens']:,}")
    print(f"✓ {pipeline.vocab.stats()}")
    print(RULE)
    print()
    return pipeline


def handle_encode(pipeline: TextPipeline) -> None:
    print("\n=== ENCODE TEXT ===")
    text = _read("Enter text to encode: ")
    if not text.strip():
        print("\nNo input provided.\n")
        return
    result = pipeline.encode_request(text)
    print("\n" + result.details)
    print(f"Encoded IDs (copy for decoding): {result.ids_text}")
    print()
    _read("Press Enter to continue...")


def handle_decode(pipeline: TextPipeline) -> None:
    print("\n=== DECODE IDs ===")
    ids_text = _read("Enter space-separated token IDs: ")
    if not ids_text.strip():
        print("\nNo input provided.\n")
        return
    result = pipeline.decode_request(ids_text)
    print("\n" + result.details)
    print()
    _read("Press Enter to continue...")


def run_interactive_loop(pipeline: TextPipeline) -> None:
    # EOF anywhere (closed stdin, piped input exhausted) ends the session cleanly
    try:
        while True:
            print(MENU)
            choice = _read("Enter your choice (1-3): ").strip()
            if choice == "1":
                handle_encode(pipeline)
            elif choice == "2":
                handle_decode(pipeline)
            elif choice == "3":
                print("\nGoodbye!")
                return
            else:
                print("\nInvalid choice. Please enter 1, 2, or 3.\n")
    except _EndOfInput:
        print("\nInput stream closed. Goodbye!")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Word-level tokenizer with an encode/decode shell")
    ap.add_argument("--data_dir", default=None, help="where downloaded books are cached")
    ap.add_argument("--log_dir", default=None)
    ap.add_argument("--log_level", default=None)
    ap.add_argument("--no_log_file", action="store_true")
    ap.add_argument("--no_progress", action="store_true")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    corpus_cfg = CorpusConfig()
    app_cfg = AppConfig()
    if args.data_dir:
        corpus_cfg = dataclasses.replace(corpus_cfg, data_dir=Path(args.data_dir))
    if args.log_dir:
        app_cfg = dataclasses.replace(app_cfg, log_dir=Path(args.log_dir))
    if args.log_level:
        app_cfg = dataclasses.replace(app_cfg, log_level=args.log_level)
    if args.no_log_file:
        app_cfg = dataclasses.replace(app_cfg, log_to_file=False)
    if args.no_progress:
        app_cfg = dataclasses.replace(app_cfg, show_progress=False)

    setup_logger(app_cfg, name="tinytok")

    try:
        pipeline = build_pipeline(corpus_cfg, app_cfg)
    except (CorpusError, requests.RequestException, OSError) as e:
        logger.exception("Error: %s", e)
        return 1

    run_interactive_loop(pipeline)
    return 0


if __name__ == "__main__":
    sys.exit(main())
