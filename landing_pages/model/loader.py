"""Load page model payloads into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _flag, _mapping, _member, _optional_str, _order, _text
from .models import (
    Alignment,
    BackgroundType,
    ButtonAction,
    CallToActionData,
    CallToActionSection,
    ContentData,
    ContentSection,
    FontFamily,
    FormFields,
    GlobalStyles,
    HeroData,
    HeroSection,
    ImagePosition,
    Padding,
    PageMetadata,
    PageModel,
    PageModelError,
    Section,
    UnknownSection,
)


def load_page_model(path: Path) -> PageModel:
    """Load a page model from a YAML or JSON file.

    Parameters
    ----------
    path : Path
        Filesystem path to the exported page document. JSON is accepted
        because it is a subset of YAML 1.2.

    Returns
    -------
    PageModel
        The parsed, immutable page model.

    Raises
    ------
    FileNotFoundError
        If no file exists at ``path``.
    PageModelError
        If the payload does not describe a page.
    YAMLError
        If the content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> page = load_page_model(Path("pages/spring-sale.json"))  # doctest: +SKIP
    >>> [section.kind for section in page.sections]  # doctest: +SKIP
    ['hero', 'content', 'cta']
    """
    if not path.exists():
        msg = f"Page model file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    return parse_page_model(loaded)


def parse_page_model(payload: object) -> PageModel:
    """Build a :class:`PageModel` from the editor's JSON wire shape.

    Keys follow the editor's camelCase naming (``globalStyles``,
    ``buttonText``, ``formFields`` and so on). Display strings default to the
    empty string and unrecognized enum values fall back to the editor default.
    Sections whose ``type`` is not ``hero``, ``content`` or ``cta`` are kept
    as :class:`UnknownSection` so the renderer can skip them.

    Raises
    ------
    PageModelError
        If the payload, its sections, or a section's id/order are malformed.
    """
    if not isinstance(payload, typ.Mapping):
        msg = "Top-level page model must be a mapping."
        raise PageModelError(msg)

    sections_raw = payload.get("sections")
    if sections_raw is None:
        sections_raw = []
    if not isinstance(sections_raw, list):
        msg = "Page model 'sections' must be a list."
        raise PageModelError(msg)

    sections = tuple(
        _build_section(entry, index) for index, entry in enumerate(sections_raw)
    )
    theme = _build_theme(_mapping(payload.get("globalStyles"), where="globalStyles"))
    metadata_raw = _mapping(payload.get("metadata"), where="metadata")
    metadata = PageMetadata(
        description=_text(metadata_raw, "description"),
        favicon=_optional_str(metadata_raw.get("favicon")),
    )
    return PageModel(
        id=_optional_str(payload.get("id")) or "page",
        title=_text(payload, "title"),
        sections=sections,
        theme=theme,
        metadata=metadata,
    )


def _build_theme(payload: typ.Mapping[str, typ.Any]) -> GlobalStyles:
    """Build the theme, keeping raw color strings as given."""
    base = GlobalStyles()
    return GlobalStyles(
        primary_color=_text(payload, "primaryColor", base.primary_color),
        secondary_color=_text(payload, "secondaryColor", base.secondary_color),
        font_family=_member(FontFamily, payload.get("fontFamily"), base.font_family),
    )


def _build_section(entry: object, index: int) -> Section | UnknownSection:
    """Dispatch a raw section entry to the builder for its kind."""
    raw = _mapping(entry, where=f"section #{index}")
    section_id = _optional_str(raw.get("id"))
    if section_id is None:
        msg = f"Section #{index} is missing an 'id'."
        raise PageModelError(msg)
    order = _order(raw.get("order", index), section_id=section_id)
    kind = str(raw.get("type", "")).strip().lower()
    data = _mapping(raw.get("data"), where=f"section '{section_id}' data")

    match kind:
        case "hero":
            return HeroSection(id=section_id, order=order, data=_build_hero(data))
        case "content":
            return ContentSection(
                id=section_id, order=order, data=_build_content(data)
            )
        case "cta":
            return CallToActionSection(
                id=section_id, order=order, data=_build_call_to_action(data)
            )
        case _:
            return UnknownSection(id=section_id, order=order, kind=kind, data=data)


def _build_hero(data: typ.Mapping[str, typ.Any]) -> HeroData:
    base = HeroData()
    return HeroData(
        headline=_text(data, "headline"),
        subheadline=_text(data, "subheadline"),
        button_text=_text(data, "buttonText"),
        button_action=_member(ButtonAction, data.get("buttonAction"), base.button_action),
        background_type=_member(
            BackgroundType, data.get("backgroundType"), base.background_type
        ),
        background_color=_text(data, "backgroundColor", base.background_color),
        background_image=_optional_str(data.get("backgroundImage")),
        background_gradient=_optional_str(data.get("backgroundGradient")),
        text_color=_text(data, "textColor", base.text_color),
        button_color=_text(data, "buttonColor", base.button_color),
        alignment=_member(Alignment, data.get("alignment"), base.alignment),
    )


def _build_content(data: typ.Mapping[str, typ.Any]) -> ContentData:
    base = ContentData()
    return ContentData(
        title=_text(data, "title"),
        content=_text(data, "content"),
        image_url=_optional_str(data.get("imageUrl")),
        image_position=_member(
            ImagePosition, data.get("imagePosition"), base.image_position
        ),
        background_color=_text(data, "backgroundColor", base.background_color),
        text_color=_text(data, "textColor", base.text_color),
        padding=_member(Padding, data.get("padding"), base.padding),
    )


def _build_call_to_action(data: typ.Mapping[str, typ.Any]) -> CallToActionData:
    base = CallToActionData()
    fields_raw = _mapping(data.get("formFields"), where="formFields")
    fields = FormFields(
        name=_flag(fields_raw, "name", base.form_fields.name),
        email=_flag(fields_raw, "email", base.form_fields.email),
        phone=_flag(fields_raw, "phone", base.form_fields.phone),
    )
    return CallToActionData(
        title=_text(data, "title"),
        description=_text(data, "description"),
        form_enabled=_flag(data, "formEnabled", base.form_enabled),
        form_fields=fields,
        button_text=_text(data, "buttonText", base.button_text),
        recipient_email=_text(data, "recipientEmail").strip(),
        background_color=_text(data, "backgroundColor", base.background_color),
        text_color=_text(data, "textColor", base.text_color),
        button_color=_text(data, "buttonColor", base.button_color),
    )


__all__ = ["load_page_model", "parse_page_model"]
