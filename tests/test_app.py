import main


def test_word_count():
    assert main.count_words("  one   two\n\nthree ") == 3
    assert main.format_word_count("one") == "1 word"
    assert main.format_word_count("") == "0 words"


def test_extract_markdown_text():
    md = "# Title\n\nSome **bold** and a [link](http://x.y).\n\n```\ncode\n```\n"
    assert main.extract_markdown_text(md) == "Title\n\nSome bold and a link."


def test_extract_rtf_text():
    assert main.extract_rtf_text(r"{\rtf1\ansi Hello \b World\b0 .}") == "Hello World."


def test_export_text():
    assert main.export_text(["A.", "B."], ["x", "y"]) == "A.\n\nB.\n\nKeywords: x, y\n"
    assert main.export_text(["A."], []) == "A.\n"
