from responder.parsing import FALLBACK_RESPONSE, parse_default_text, parse_keyword_text


def test_keyword_record_fans_in():
    table = parse_keyword_text("hello,hi\nHi there!\n\n")

    assert table == {"hello": "hi there!", "hi": "hi there!"}


def test_all_records_load():
    text = (
        "crash , Crashes\n"
        "It never crashes here.\n"
        "\n"
        "linux\n"
        "We take Linux seriously.\n"
        "\n"
        "mac\n"
        "Report it to Apple.\n"
    )

    table = parse_keyword_text(text)

    assert table == {
        "crash": "it never crashes here.",
        "crashes": "it never crashes here.",
        "linux": "we take linux seriously.",
        "mac": "report it to apple.",
    }


def test_later_duplicate_key_wins():
    table = parse_keyword_text("bug\nfirst\n\nbug,error\nsecond\n")

    assert table["bug"] == "second"
    assert table["error"] == "second"


def test_records_without_separator_line():
    table = parse_keyword_text("a\none\nb\ntwo\n")

    assert table == {"a": "one", "b": "two"}


def test_dangling_keyword_line_is_skipped(caplog):
    table = parse_keyword_text("a\none\n\norphan\n")

    assert table == {"a": "one"}
    assert "orphan" in caplog.text


def test_empty_keys_are_dropped():
    assert parse_keyword_text("a,,b\nresp\n") == {"a": "resp", "b": "resp"}
    assert parse_keyword_text(" , \nresp\n") == {}


def test_empty_keyword_text():
    assert parse_keyword_text("") == {}


def test_default_paragraphs():
    responses = parse_default_text("Tell me more.\n\nGo on.\n")

    assert responses == ("Tell me more.", "Go on.")


def test_default_multiline_paragraph_concatenates():
    text = "That sounds odd. Could you describe\nthat problem in more detail?\n\n\nGo on."

    assert parse_default_text(text) == (
        "That sounds odd. Could you describethat problem in more detail?",
        "Go on.",
    )


def test_whitespace_only_line_separates():
    assert parse_default_text("one\n   \ntwo") == ("one", "two")


def test_default_fallback_when_empty():
    assert parse_default_text("") == (FALLBACK_RESPONSE,)
    assert parse_default_text("\n\n  \n") == (FALLBACK_RESPONSE,)
    assert parse_default_text("", fallback="Huh?") == ("Huh?",)
