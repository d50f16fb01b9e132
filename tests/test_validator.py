"""Tests for the advisory document validator and performance report."""

from __future__ import annotations

import pytest

from landing_pages.compiler import analyze_performance, validate

HEAD = (
    "<!DOCTYPE html><html lang=\"en\"><head>"
    '<meta charset="UTF-8">'
    '<meta name="viewport" content="width=device-width, initial-scale=1.0">'
    "<title>T</title></head>"
)


def _document(body: str) -> str:
    return f"{HEAD}<body>{body}</body></html>"


def test_valid_document_has_no_warnings() -> None:
    body = (
        '<section id="a"><img src="x.jpg" alt="x"><br>'
        '<form><input type="email" placeholder="Email"></form></section>'
    )
    assert validate(_document(body)) == []


def test_missing_required_elements() -> None:
    assert validate("<p>hi</p>") == [
        "Missing DOCTYPE declaration",
        "Missing html tag",
        "Missing head tag",
        "Missing body tag",
        "Missing title tag",
        "Missing viewport meta tag",
    ]


def test_unclosed_and_extra_tags() -> None:
    warnings = validate(_document("<div><div></div><p></p></span>"))
    assert warnings == [
        "Unclosed tag: div (1 unclosed)",
        "Extra closing tag: span (1 extra)",
    ]


def test_script_and_style_content_is_not_balanced() -> None:
    body = (
        "<script>var s = '<div><div>'; if (a < b) {}</script>"
        "<style>a > b { color: red; }</style>"
        "<!-- <section> -->"
    )
    assert validate(_document(body)) == []


def test_oversized_document_is_reported() -> None:
    html = _document("<p>" + "x" * (250 * 1024) + "</p>")
    warnings = validate(html)
    assert warnings == ["HTML file size (250KB) exceeds recommended 200KB"]


def test_image_without_alt_is_reported() -> None:
    body = '<img src="a.jpg" alt="a"><img src="b.jpg"><img src="c.jpg" alt="">'
    assert validate(_document(body)) == [
        "Image 2 missing alt attribute for accessibility"
    ]


def test_unlabelled_text_input_is_reported() -> None:
    body = (
        '<label for="n">Name</label><input type="text" id="n">'
        '<input type="email" name="email">'
        '<input type="hidden" name="form-name">'
        '<input type="tel" aria-label="Phone">'
    )
    assert validate(_document(body)) == [
        "Form input 2 missing label or placeholder"
    ]


def test_data_attributes_do_not_count_as_ids() -> None:
    body = '<label for="p">Page</label><input data-page-id="p" type="text">'
    assert validate(_document(body)) == [
        "Form input 1 missing label or placeholder"
    ]


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        (
            '<a href="javascript:void(0)">x</a>',
            "Found javascript: URI which may be blocked by browsers",
        ),
        (
            '<a href="data:text/html,hello">x</a>',
            "Found data:text/html URI which may pose security risks",
        ),
    ],
)
def test_disallowed_schemes(body: str, expected: str) -> None:
    assert validate(_document(body)) == [expected]


@pytest.mark.parametrize("html", ["", "<", "</", "<<>>", "<div", "\x00�"])
def test_validate_never_raises(html: str) -> None:
    assert isinstance(validate(html), list)


def test_warnings_follow_check_order() -> None:
    html = "<div><img src=a.jpg>javascript:"
    warnings = validate(html)
    assert warnings[0] == "Missing DOCTYPE declaration"
    assert warnings.index("Unclosed tag: div (1 unclosed)") < warnings.index(
        "Image 1 missing alt attribute for accessibility"
    )
    assert warnings[-1] == "Found javascript: URI which may be blocked by browsers"


def test_performance_report_for_small_page() -> None:
    html = _document("<style>p{}</style><script>x()</script><img src=a alt=a>")
    report = analyze_performance(html)
    assert report.size == len(html.encode("utf-8"))
    assert report.css_size == len("<style>p{}</style>")
    assert report.script_size == len("<script>x()</script>")
    assert report.image_count == 1
    assert report.estimated_load_seconds == 0
    assert report.recommendations == ("Good performance; page should load quickly",)


def test_performance_report_flags_large_pages() -> None:
    html = _document("<p>" + "x" * (120 * 1024) + "</p>")
    report = analyze_performance(html)
    assert report.recommendations[0] == (
        "Consider reducing HTML size; currently over 100KB"
    )
    assert report.recommendations[-1] == "Performance needs improvement"
