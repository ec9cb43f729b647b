import logging
from pathlib import Path

import requests

from tinytok.configs.config import BookSource, CorpusConfig

logger = logging.getLogger(__name__)

# ----- Corpus acquisition ------
"""
Process:
1. Look for <data_dir>/<filename>; if it exists, read it (cache hit, no network).
2. Otherwise GET the url, write the body to <data_dir>/<filename>, return it.
3. Strip the Project Gutenberg license header/footer so it never reaches the vocabulary.
Any failure here is fatal for the caller: a partial vocabulary is not usable.
"""

START_MARKERS = (
    "*** START OF THE PROJECT GUTENBERG EBOOK",
    "*** START OF THIS PROJECT GUTENBERG EBOOK",
)
END_MARKERS = (
    "*** END OF THE PROJECT GUTENBERG EBOOK",
    "*** END OF THIS PROJECT GUTENBERG EBOOK",
)


class CorpusError(RuntimeError):
    """A corpus could not be downloaded, came back empty, or its cached copy is unreadable."""


# -------------------------
# IO
# -------------------------
def load_corpus(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def download_or_cache(book: BookSource, cfg: CorpusConfig) -> str:
    data_dir = Path(cfg.data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    file_path = data_dir / book.filename

    if file_path.exists():
        logger.info("[Cache Hit] Loading local file: %s", book.filename)
        try:
            return load_corpus(file_path)
        except UnicodeDecodeError as e:
            raise CorpusError(f"Cached file {file_path} is not valid UTF-8; delete it to re-download") from e

    logger.info("[Network] Downloading from: %s", book.url)
    try:
        resp = requests.get(book.url, timeout=(cfg.connect_timeout, cfg.read_timeout))
        resp.raise_for_status()
    except requests.RequestException as e:
        raise CorpusError(f"Failed to download {book.title!r} from {book.url}") from e

    resp.encoding = "utf-8"
    text = resp.text
    if not text:
        raise CorpusError(f"Empty response for {book.title!r} from {book.url}")

    file_path.write_text(text, encoding="utf-8")
    logger.info("[Persisted] Saved to: %s", book.filename)
    return text


# -------------------------
# Cleaning
# -------------------------
def _find_first(text: str, markers) -> int:
    for marker in markers:
        idx = text.find(marker)
        if idx != -1:
            return idx
    return -1


def strip_gutenberg_boilerplate(text: str) -> str:
    start = _find_first(text, START_MARKERS)
    # book starts on the line after the marker; no marker -> keep from the top
    start = text.find("\n", start) + 1 if start != -1 else 0

    end = _find_first(text, END_MARKERS)
    if end == -1 or end < start:
        end = len(text)
    return text[start:end].strip()


def fetch_corpus(book: BookSource, cfg: CorpusConfig) -> str:
    text = download_or_cache(book, cfg)
    if cfg.strip_boilerplate:
        text = strip_gutenberg_boilerplate(text)
    return text
