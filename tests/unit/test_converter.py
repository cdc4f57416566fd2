"""Unit tests for HTML fragment cleanup."""

from src.web.converter import clean_html_text


def test_strips_emphasis_tags():
    assert clean_html_text("The <b>Python</b> language") == "The Python language"


def test_decodes_entities():
    assert clean_html_text("Python &amp; You &#x27;24") == "Python & You '24"


def test_collapses_whitespace():
    assert clean_html_text("  lots \n\n of\t  space  ") == "lots of space"


def test_empty_input():
    assert clean_html_text("") == ""
    assert clean_html_text("   ") == ""
