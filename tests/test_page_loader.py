"""Tests for loading editor payloads into page models."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest

from landing_pages.model import (
    ButtonAction,
    CallToActionSection,
    ContentSection,
    FontFamily,
    HeroSection,
    ImagePosition,
    Padding,
    PageModelError,
    UnknownSection,
    load_page_model,
    parse_page_model,
)


def test_parse_sample_payload(sample_payload: dict[str, typ.Any]) -> None:
    page = parse_page_model(sample_payload)
    assert page.id == "spring-sale"
    assert page.title == "Spring Sale"
    assert page.theme.font_family is FontFamily.CLASSIC
    assert page.metadata.favicon == "https://cdn.example.com/favicon.ico"
    hero, content, cta = page.sections
    assert isinstance(hero, HeroSection)
    assert hero.data.button_action is ButtonAction.SCROLL
    assert isinstance(content, ContentSection)
    assert content.data.image_position is ImagePosition.LEFT
    assert content.data.padding is Padding.MEDIUM
    assert isinstance(cta, CallToActionSection)
    assert cta.data.form_enabled is True
    assert cta.data.form_fields.enabled() == ["name", "email"]
    assert cta.data.recipient_email == "owner@example.com"


def test_missing_optional_values_use_defaults() -> None:
    page = parse_page_model(
        {"title": "Bare", "sections": [{"id": "h", "type": "hero"}]}
    )
    assert page.id == "page"
    assert page.metadata.description == ""
    (hero,) = page.sections
    assert hero.order == 0
    assert hero.data.headline == ""
    assert hero.data.background_color == "#1e3a8a"


def test_unrecognized_enum_values_fall_back() -> None:
    payload = {
        "globalStyles": {"fontFamily": "gothic"},
        "sections": [
            {
                "id": "c",
                "type": "content",
                "order": 0,
                "data": {"imagePosition": "diagonal", "padding": "LARGE"},
            }
        ],
    }
    page = parse_page_model(payload)
    assert page.theme.font_family is FontFamily.MODERN
    (content,) = page.sections
    assert content.data.image_position is ImagePosition.RIGHT
    assert content.data.padding is Padding.LARGE


def test_unknown_section_kinds_are_kept() -> None:
    page = parse_page_model(
        {"sections": [{"id": "v", "type": "Video", "order": 3, "data": {"a": 1}}]}
    )
    (section,) = page.sections
    assert isinstance(section, UnknownSection)
    assert section.kind == "video"
    assert section.order == 3


@pytest.mark.parametrize(
    ("value", "expected"),
    [("yes", True), ("off", False), (1, True), (None, False)],
)
def test_boolean_flags_accept_editor_spellings(value: object, expected: bool) -> None:
    page = parse_page_model(
        {
            "sections": [
                {"id": "a", "type": "cta", "data": {"formEnabled": value}}
            ]
        }
    )
    assert page.sections[0].data.form_enabled is expected


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ([], "Top-level page model must be a mapping."),
        ({"sections": {}}, "Page model 'sections' must be a list."),
        ({"sections": [{"type": "hero"}]}, "Section #0 is missing an 'id'."),
        (
            {"sections": [{"id": "h", "order": "first"}]},
            "Section 'h' has a non-integer order: 'first'.",
        ),
        (
            {"sections": [{"id": "h", "order": True}]},
            "Section 'h' has a non-integer order: True.",
        ),
        ({"sections": ["hero"]}, "Expected a mapping for section #0, got str."),
    ],
)
def test_malformed_payloads_are_rejected(payload: object, message: str) -> None:
    with pytest.raises(PageModelError) as excinfo:
        parse_page_model(payload)
    assert str(excinfo.value) == message


def test_numeric_strings_are_valid_orders() -> None:
    page = parse_page_model({"sections": [{"id": "h", "order": " 4 "}]})
    assert page.sections[0].order == 4


def test_load_json_file(tmp_path: Path, sample_payload: dict[str, typ.Any]) -> None:
    path = tmp_path / "page.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    page = load_page_model(path)
    assert [section.kind for section in page.sections] == ["hero", "content", "cta"]


def test_load_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "page.yaml"
    path.write_text(
        "id: yaml-page\n"
        "title: From YAML\n"
        "sections:\n"
        "  - id: hero-1\n"
        "    type: hero\n"
        "    order: 0\n"
        "    data:\n"
        "      headline: Hello\n",
        encoding="utf-8",
    )
    page = load_page_model(path)
    assert page.id == "yaml-page"
    assert page.sections[0].data.headline == "Hello"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_page_model(tmp_path / "absent.yaml")
