from hanzicrawl.common.logging import (
    clear_log_context,
    format_message,
    listing_name,
    log_debug,
    log_error,
    set_log_context,
)


def test_listing_name():
    assert listing_name("http://hanzidb.org/character-list/by-frequency?page=") == "by-frequency"
    assert listing_name("http://hanzidb.org/?page=") == "http://hanzidb.org/?page="


def test_context_prefix():
    set_log_context("http://hanzidb.org/character-list/general-standard?page=", 3)
    try:
        assert format_message("fetch", "GET x") == "[general-standard p3] [fetch] 🌐 GET x"
    finally:
        clear_log_context()
    assert format_message("done", "ok") == "[done] ok"


def test_debug_and_error_streams(capsys):
    log_debug(False, "hidden")
    log_debug(True, "shown")
    log_error("boom")
    captured = capsys.readouterr()
    assert captured.out == "[debug] shown\n"
    assert captured.err == "[error] 💥 boom\n"
