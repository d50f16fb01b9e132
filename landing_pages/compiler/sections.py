"""Render each kind of content block into an HTML fragment.

Rendering is a pure function of the section and a :class:`RenderContext`:
anchors to other blocks, the animation flag, and the build stamp all arrive
through the context, so the same inputs always produce the same fragment.
Author text is escaped by Jinja autoescaping; color, gradient, and image
values inserted into ``style`` attributes pass through ``raw_style`` and are
not validated.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from landing_pages.model import (
    BackgroundType,
    ButtonAction,
    CallToActionSection,
    ContentSection,
    FormService,
    HeroData,
    HeroSection,
    UnknownSection,
)

from .assets import SECTION_TEMPLATES

if typ.TYPE_CHECKING:
    from collections.abc import Sequence

    from landing_pages.model import Section

    from .assets import CompilerAssets

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class FieldSpec:
    """Markup attributes of one contact form input."""

    name: str
    type: str
    placeholder: str
    autocomplete: str


FORM_FIELDS: dict[str, FieldSpec] = {
    "name": FieldSpec("name", "text", "Your Name", "name"),
    "email": FieldSpec("email", "email", "Your Email", "email"),
    "phone": FieldSpec("phone", "tel", "Your Phone", "tel"),
}


@dc.dataclass(frozen=True, slots=True)
class RenderContext:
    """Page-level facts a section renderer may consult.

    Attributes
    ----------
    page_id : str
        Identifier of the page being compiled.
    build_stamp : int
        Milliseconds since the epoch, taken from the injected clock.
    first_content_id : str | None
        Id of the first content block in render order.
    first_cta_id : str | None
        Id of the first call-to-action block in render order.
    form_service : FormService
        Backend the forms on this page submit to.
    animate : bool
        Whether animation classes are emitted.
    """

    page_id: str
    build_stamp: int
    first_content_id: str | None = None
    first_cta_id: str | None = None
    form_service: FormService = FormService.CUSTOM_ENDPOINT
    animate: bool = False

    @property
    def page_identifier(self) -> str:
        """Return the identifier sent along with form submissions."""
        return f"{self.page_id}-{self.build_stamp}"

    @classmethod
    def for_sections(
        cls,
        sections: Sequence[Section | UnknownSection],
        *,
        page_id: str,
        build_stamp: int,
        form_service: FormService,
        animate: bool,
    ) -> RenderContext:
        """Resolve anchor targets from ``sections`` already in render order."""
        first_content = next(
            (s.id for s in sections if isinstance(s, ContentSection)), None
        )
        first_cta = next(
            (s.id for s in sections if isinstance(s, CallToActionSection)), None
        )
        return cls(
            page_id=page_id,
            build_stamp=build_stamp,
            first_content_id=first_content,
            first_cta_id=first_cta,
            form_service=form_service,
            animate=animate,
        )


def form_element_id(section: CallToActionSection) -> str:
    """Return the DOM id of the form rendered for ``section``."""
    return f"form-{section.id}"


def form_message_id(section: CallToActionSection) -> str:
    """Return the DOM id of the status region inside the form."""
    return f"form-message-{section.id}"


def order_sections(
    sections: Sequence[Section | UnknownSection],
) -> list[Section | UnknownSection]:
    """Return ``sections`` by ascending ``order``; ties keep input order."""
    return sorted(sections, key=lambda section: section.order)


class SectionRenderer:
    """Render sections through the preloaded section templates."""

    def __init__(self, assets: CompilerAssets) -> None:
        self._templates = {
            kind: assets.template(name) for kind, name in SECTION_TEMPLATES.items()
        }

    def render(
        self, section: Section | UnknownSection, context: RenderContext
    ) -> str:
        """Return the HTML fragment for ``section``.

        Unknown block kinds yield an empty string.
        """
        match section:
            case HeroSection():
                return self._render_hero(section, context)
            case ContentSection():
                return self._render_content(section, context)
            case CallToActionSection():
                return self._render_call_to_action(section, context)
            case UnknownSection(kind=kind):
                logger.debug("skipping section %s of unknown kind %r", section.id, kind)
                return ""
            case _:
                typ.assert_never(section)

    def render_all(
        self, sections: Sequence[Section | UnknownSection], context: RenderContext
    ) -> str:
        """Render ``sections`` in the given order and join the fragments."""
        fragments = (self.render(section, context) for section in sections)
        return "\n".join(fragment for fragment in fragments if fragment)

    def _render_hero(self, section: HeroSection, context: RenderContext) -> str:
        data = section.data
        style, overlay = hero_background(data)
        return self._templates["hero"].render(
            section=section,
            data=data,
            background_style=style,
            overlay=overlay,
            button_href=_button_href(data.button_action, context),
            animate=context.animate,
        )

    def _render_content(self, section: ContentSection, context: RenderContext) -> str:
        data = section.data
        if data.image_url and data.image_position.side_by_side:
            container_class = "content-container content-grid"
        elif data.image_url:
            container_class = "content-container content-stacked"
        else:
            container_class = "content-container"
        return self._templates["content"].render(
            section=section,
            data=data,
            paragraphs=split_paragraphs(data.content),
            container_class=container_class,
            image_first=bool(data.image_url) and data.image_position.leads,
            animate=context.animate,
        )

    def _render_call_to_action(
        self, section: CallToActionSection, context: RenderContext
    ) -> str:
        data = section.data
        fields = [FORM_FIELDS[name] for name in data.form_fields.enabled()]
        return self._templates["cta"].render(
            section=section,
            data=data,
            fields=fields,
            form_id=form_element_id(section),
            message_id=form_message_id(section),
            form_service=str(context.form_service),
            page_identifier=context.page_identifier,
            animate=context.animate,
        )


def hero_background(data: HeroData) -> tuple[str, bool]:
    """Return the inline background style and whether an overlay is needed."""
    match data.background_type:
        case BackgroundType.GRADIENT if data.background_gradient:
            return f"background: {data.background_gradient};", False
        case BackgroundType.IMAGE if data.background_image:
            style = (
                f"background-image: url('{data.background_image}'); "
                "background-size: cover; background-position: center;"
            )
            return style, True
        case _:
            return f"background-color: {data.background_color};", False


def _button_href(action: ButtonAction, context: RenderContext) -> str:
    """Resolve where a hero button points."""
    match action:
        case ButtonAction.SCROLL if context.first_content_id:
            return f"#{context.first_content_id}"
        case ButtonAction.FORM if context.first_cta_id:
            return f"#{context.first_cta_id}"
        case _:
            return "#"


def split_paragraphs(text: str) -> list[str]:
    """Split body copy on newlines, dropping blank lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


__all__ = [
    "FORM_FIELDS",
    "RenderContext",
    "SectionRenderer",
    "form_element_id",
    "form_message_id",
    "hero_background",
    "order_sections",
    "split_paragraphs",
]
