import builtins

import pytest

from tinytok.configs.config import AppConfig
from tinytok.data_loaders.corpus_loader import CorpusError
from tinytok.pipeline.text_pipeline import TextPipeline
from tinytok.shell import interactive


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with scripted lines; EOFError once they run out."""
    def _install(*lines):
        it = iter(lines)
        def _input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr(builtins, "input", _input)
    return _install

@pytest.fixture
def trained_pipeline() -> TextPipeline:
    pipe = TextPipeline()
    pipe.train(["the cat sat"])
    return pipe


def test_exit_choice(feed_input, trained_pipeline, capsys):
    feed_input("3")
    interactive.run_interactive_loop(trained_pipeline)
    out = capsys.readouterr().out
    assert "1. Encode text to token IDs" in out
    assert "Goodbye!" in out
    assert "Input stream closed" not in out

def test_eof_is_a_clean_exit(feed_input, trained_pipeline, capsys):
    feed_input()
    interactive.run_interactive_loop(trained_pipeline)
    assert "Input stream closed. Goodbye!" in capsys.readouterr().out

def test_invalid_choice(feed_input, trained_pipeline, capsys):
    feed_input("9", "3")
    interactive.run_interactive_loop(trained_pipeline)
    assert "Invalid choice. Please enter 1, 2, or 3." in capsys.readouterr().out

def test_encode_flow(feed_input, trained_pipeline, capsys):
    feed_input("1", "The dog sat", "", "3")
    interactive.run_interactive_loop(trained_pipeline)
    out = capsys.readouterr().out
    assert "=== ENCODE TEXT ===" in out
    assert "'dog' → 1 [UNKNOWN]" in out
    assert "Encoded IDs (copy for decoding): 2 1 4" in out

def test_decode_flow(feed_input, trained_pipeline, capsys):
    feed_input("2", "2 1 4", "", "3")
    interactive.run_interactive_loop(trained_pipeline)
    out = capsys.readouterr().out
    assert "=== DECODE IDs ===" in out
    assert "Decoded text: the <UNK> sat" in out

def test_blank_request(feed_input, trained_pipeline, capsys):
    feed_input("1", "   ", "2", "", "3")
    interactive.run_interactive_loop(trained_pipeline)
    assert capsys.readouterr().out.count("No input provided.") == 2

def test_eof_inside_a_request(feed_input, trained_pipeline, capsys):
    feed_input("2")
    interactive.run_interactive_loop(trained_pipeline)
    assert "Input stream closed. Goodbye!" in capsys.readouterr().out


# --- startup -----------------------------------------------------------------

@pytest.fixture
def quiet_logger(monkeypatch):
    monkeypatch.setattr(interactive, "setup_logger", lambda cfg, name="tinytok": None)

def test_build_pipeline_trains_on_every_book(monkeypatch, corpus_config, capsys):
    monkeypatch.setattr(interactive, "fetch_corpus", lambda book, cfg: "The cat sat. The cat ran.")
    pipe = interactive.build_pipeline(corpus_config, AppConfig(log_to_file=False, show_progress=False))
    assert pipe.vocab.token_id("ran") == 6
    out = capsys.readouterr().out
    assert "✓ Total tokens processed: 8" in out
    assert "✓ Vocabulary size: 7 tokens (including <PAD> and <UNK>)" in out

def test_main_runs_session(monkeypatch, quiet_logger, feed_input, tmp_path, capsys):
    monkeypatch.setattr(interactive, "fetch_corpus", lambda book, cfg: "hello world")
    feed_input("2", "2 3", "", "3")
    rc = interactive.main(["--data_dir", str(tmp_path), "--no_log_file", "--no_progress"])
    assert rc == 0
    assert "Decoded text: hello world" in capsys.readouterr().out

def test_main_aborts_on_acquisition_failure(monkeypatch, quiet_logger, feed_input, capsys):
    def _boom(book, cfg):
        raise CorpusError("offline")
    monkeypatch.setattr(interactive, "fetch_corpus", _boom)
    feed_input("3")
    assert interactive.main(["--no_log_file", "--no_progress"]) == 1
    assert "MENU" not in capsys.readouterr().out

def test_shell_logger_lives_under_package_logger():
    # stays under "tinytok" even when the module runs as __main__
    assert interactive.logger.name == "tinytok.shell.interactive"

def test_main_aborts_on_corrupt_cache(quiet_logger, feed_input, tmp_path, capsys):
    from tinytok.configs.config import DEFAULT_BOOKS
    for book in DEFAULT_BOOKS:
        (tmp_path / book.filename).write_bytes(b"\xff\xfe\xfd")
    feed_input("3")
    assert interactive.main(["--data_dir", str(tmp_path), "--no_log_file", "--no_progress"]) == 1
    assert "MENU" not in capsys.readouterr().out
