from dataclasses import dataclass, field
from typing import Tuple

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent.resolve()


# One Project Gutenberg plain-text book
@dataclass(frozen=True)
class BookSource:
    title: str
    url: str
    filename: str


DEFAULT_BOOKS: Tuple[BookSource, ...] = (
    BookSource("Frankenstein", "https://www.gutenberg.org/cache/epub/84/pg84.txt", "frankenstein.txt"),
    BookSource("Pride and Prejudice", "https://www.gutenberg.org/cache/epub/1342/pg1342.txt",
               "pride_and_prejudice.txt"),
    BookSource("Alice's Adventures in Wonderland", "https://www.gutenberg.org/cache/epub/11/pg11.txt",
               "alice_in_wonderland.txt"),
)


# Corpus acquisition
# frozen=True: prevents accidental mutation
@dataclass(frozen=True)
class CorpusConfig:
    data_dir: Path = PROJECT_ROOT / "data"
    books: Tuple[BookSource, ...] = field(default=DEFAULT_BOOKS)
    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    strip_boilerplate: bool = True

    def __post_init__(self):
        if not self.books:
            raise ValueError("CorpusConfig.books must name at least one book")
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ValueError("timeouts must be positive")


# Interactive app: logging + progress display
@dataclass(frozen=True)
class AppConfig:
    log_dir: Path = PROJECT_ROOT / "logs"
    log_level: str = "INFO"  # DEBUG/INFO/WARNING/ERROR
    log_to_file: bool = True
    show_progress: bool = True
