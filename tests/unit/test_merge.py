"""Unit tests for header injection."""

import pytest

from msg_header_merge.render.merge import inject_header


def test_header_goes_after_body_tag() -> None:
    body = '<html><head><title>t</title></head><body style="x">content</body></html>'

    merged = inject_header(body, "<table></table>", is_html=True)

    assert merged == (
        '<html><head><title>t</title></head><body style="x"><table></table>content</body></html>'
    )


def test_body_tag_match_is_case_insensitive() -> None:
    merged = inject_header("<HTML><BODY>text</BODY></HTML>", "H", is_html=True)

    assert merged == "<HTML><BODY>Htext</BODY></HTML>"


def test_only_first_body_tag_is_used() -> None:
    merged = inject_header("<body>a<body>b", "H", is_html=True)

    assert merged == "<body>Ha<body>b"


def test_body_prefixed_words_are_not_body_tags() -> None:
    merged = inject_header("<bodytext>a</bodytext>", "H", is_html=True)

    assert merged == "H<bodytext>a</bodytext>"


def test_html_without_body_tag_gets_header_prepended() -> None:
    merged = inject_header("<p>fragment</p>", "H", is_html=True)

    assert merged == "H<p>fragment</p>"


def test_text_header_is_prepended() -> None:
    merged = inject_header("<body>not html</body>", "From: a\n\n", is_html=False)

    assert merged == "From: a\n\n<body>not html</body>"


@pytest.mark.parametrize("is_html", [True, False])
def test_empty_header_leaves_body_unchanged(is_html: bool) -> None:
    body = "<html><body>x</body></html>"

    assert inject_header(body, "", is_html) == body
