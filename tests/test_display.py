from unisecretary.display import underline_text


def test_underline_matches_length():
    result = underline_text("OPTION LIST:")
    title, rule = result.split("\n")
    assert title == "OPTION LIST:"
    assert rule == "-" * len(title)


def test_underline_counts_trailing_newline():
    result = underline_text("abc\n")
    assert result.startswith("abc\n\n")
    assert result.endswith("-" * len("abc\n"))


def test_underline_empty():
    assert underline_text("") == "\n"