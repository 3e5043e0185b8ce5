"""Tests for comment block construction and preamble composition."""

import pytest

from ghworkflows.preamble import Preamble, PreambleMode, commentify, compose_preamble, provenance


def test_commentify_empty_text_is_empty():
    assert commentify("") == ""


def test_commentify_prefixes_lines_and_adds_blank_line():
    assert commentify("first\nsecond") == "# first\n# second\n\n"


def test_commentify_trims_trailing_whitespace():
    assert commentify("text   \n\nmore") == "# text\n#\n# more\n\n"


def test_provenance_names_source_path():
    text = provenance("src/build.main.kts")

    assert text.splitlines()[0] == "This file was generated using Python DSL (src/build.main.kts)."


def test_provenance_without_source_is_generic():
    assert provenance(None).splitlines()[0] == "This file was generated using a Python DSL."


def test_default_is_generated_block_only():
    assert compose_preamble(None, "x.py") == commentify(provenance("x.py"))
    assert compose_preamble(Preamble("ignored"), "x.py") == commentify(provenance("x.py"))


def test_replace():
    assert compose_preamble(Preamble.just("Only me"), "x.py") == "# Only me\n\n"


def test_custom_before_generated():
    result = compose_preamble(Preamble.before("Do not edit"), "src/build.main.kts")

    assert result == "# Do not edit\n\n" + commentify(provenance("src/build.main.kts"))


def test_custom_after_generated():
    result = compose_preamble(Preamble.after("Footer"), None)

    assert result == commentify(provenance(None)) + "# Footer\n\n"


@pytest.mark.parametrize("mode", [PreambleMode.CUSTOM_BEFORE, PreambleMode.CUSTOM_AFTER, PreambleMode.GENERATED])
def test_empty_custom_text_yields_generated_block(mode):
    assert compose_preamble(Preamble("", mode), "a/b.py") == commentify(provenance("a/b.py"))


def test_replace_with_empty_text_is_empty():
    assert compose_preamble(Preamble.just(""), "a/b.py") == ""
