"""Typed dataclasses describing landing page models and compiler output."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ


class PageModelError(ValueError):
    """Raised when a page model payload is malformed or incomplete."""


class FontFamily(enum.StrEnum):
    """Font families offered by the editor."""

    MODERN = "modern"
    CLASSIC = "classic"
    PLAYFUL = "playful"

    @property
    def stack(self) -> str:
        """Return the CSS font stack for this family."""
        return _FONT_STACKS[self]


_FONT_STACKS: dict[FontFamily, str] = {
    FontFamily.MODERN: (
        "'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif"
    ),
    FontFamily.CLASSIC: "'Georgia', 'Times New Roman', serif",
    FontFamily.PLAYFUL: "'Comic Sans MS', cursive, sans-serif",
}


class ButtonAction(enum.StrEnum):
    """Where a hero button leads."""

    SCROLL = "scroll"
    FORM = "form"
    LINK = "link"


class BackgroundType(enum.StrEnum):
    """Backdrop styles available to hero blocks."""

    COLOR = "color"
    IMAGE = "image"
    GRADIENT = "gradient"


class Alignment(enum.StrEnum):
    """Horizontal text alignment for hero copy."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ImagePosition(enum.StrEnum):
    """Placement of the image relative to the text in a content block."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def leads(self) -> bool:
        """Return whether the image precedes the text in document order."""
        return self in (ImagePosition.LEFT, ImagePosition.TOP)

    @property
    def side_by_side(self) -> bool:
        """Return whether image and text share a row."""
        return self in (ImagePosition.LEFT, ImagePosition.RIGHT)


class Padding(enum.StrEnum):
    """Vertical padding presets for content blocks."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def css_class(self) -> str:
        """Return the utility class implementing this padding."""
        return {"small": "py-8", "medium": "py-16", "large": "py-24"}[self.value]


class FormService(enum.StrEnum):
    """Submission backends a call-to-action form can be wired to."""

    HOSTED_FORM_SERVICE = "hosted-form-service"
    PLATFORM_NATIVE_FORMS = "platform-native-forms"
    CUSTOM_ENDPOINT = "custom-endpoint"

    @classmethod
    def parse(cls, value: str | FormService) -> FormService:
        """Return the member named by ``value``, accepting legacy editor names.

        Raises
        ------
        ValueError
            If ``value`` names no known backend.
        """
        if isinstance(value, FormService):
            return value
        normalized = value.strip().lower()
        normalized = _LEGACY_FORM_SERVICES.get(normalized, normalized)
        return cls(normalized)


_LEGACY_FORM_SERVICES = {
    "formspree": "hosted-form-service",
    "netlify-forms": "platform-native-forms",
    "netlify": "platform-native-forms",
    "custom": "custom-endpoint",
}


@dc.dataclass(frozen=True, slots=True)
class GlobalStyles:
    """Theme palette and typography shared by every section."""

    primary_color: str = "#3b82f6"
    secondary_color: str = "#10b981"
    font_family: FontFamily = FontFamily.MODERN


@dc.dataclass(frozen=True, slots=True)
class PageMetadata:
    """SEO metadata attached to a page."""

    description: str = ""
    favicon: str | None = None


@dc.dataclass(frozen=True, slots=True)
class HeroData:
    """Display strings, colors, and flags of a hero block."""

    headline: str = ""
    subheadline: str = ""
    button_text: str = ""
    button_action: ButtonAction = ButtonAction.SCROLL
    background_type: BackgroundType = BackgroundType.COLOR
    background_color: str = "#1e3a8a"
    background_image: str | None = None
    background_gradient: str | None = None
    text_color: str = "#ffffff"
    button_color: str = "#3b82f6"
    alignment: Alignment = Alignment.CENTER


@dc.dataclass(frozen=True, slots=True)
class ContentData:
    """Display strings and layout choices of a content block."""

    title: str = ""
    content: str = ""
    image_url: str | None = None
    image_position: ImagePosition = ImagePosition.RIGHT
    background_color: str = "#ffffff"
    text_color: str = "#1f2937"
    padding: Padding = Padding.MEDIUM


@dc.dataclass(frozen=True, slots=True)
class FormFields:
    """Which inputs a call-to-action form collects."""

    name: bool = True
    email: bool = True
    phone: bool = False

    def enabled(self) -> list[str]:
        """Return the enabled field names in display order."""
        return [
            field
            for field, flag in (
                ("name", self.name),
                ("email", self.email),
                ("phone", self.phone),
            )
            if flag
        ]


@dc.dataclass(frozen=True, slots=True)
class CallToActionData:
    """Display strings and form settings of a call-to-action block."""

    title: str = ""
    description: str = ""
    form_enabled: bool = False
    form_fields: FormFields = dc.field(default_factory=FormFields)
    button_text: str = "Get Started"
    recipient_email: str = ""
    background_color: str = "#f9fafb"
    text_color: str = "#1f2937"
    button_color: str = "#3b82f6"


@dc.dataclass(frozen=True, slots=True)
class HeroSection:
    """Full-width opening block with headline and button."""

    id: str
    order: int
    data: HeroData = dc.field(default_factory=HeroData)

    kind: typ.ClassVar[str] = "hero"


@dc.dataclass(frozen=True, slots=True)
class ContentSection:
    """Text block, optionally paired with an image."""

    id: str
    order: int
    data: ContentData = dc.field(default_factory=ContentData)

    kind: typ.ClassVar[str] = "content"


@dc.dataclass(frozen=True, slots=True)
class CallToActionSection:
    """Closing block with a button or a contact form."""

    id: str
    order: int
    data: CallToActionData = dc.field(default_factory=CallToActionData)

    kind: typ.ClassVar[str] = "cta"


@dc.dataclass(frozen=True, slots=True)
class UnknownSection:
    """A block whose kind this compiler does not render."""

    id: str
    order: int
    kind: str
    data: typ.Mapping[str, typ.Any] = dc.field(default_factory=dict)


Section = HeroSection | ContentSection | CallToActionSection


@dc.dataclass(frozen=True, slots=True)
class PageModel:
    """Declarative description of a landing page."""

    id: str
    title: str
    sections: tuple[Section | UnknownSection, ...]
    theme: GlobalStyles = dc.field(default_factory=GlobalStyles)
    metadata: PageMetadata = dc.field(default_factory=PageMetadata)


@dc.dataclass(frozen=True, slots=True)
class GeneratorOptions:
    """Flags recognized by :class:`~landing_pages.compiler.PageCompiler`.

    Attributes
    ----------
    minify : bool
        Run the optimizer over the assembled document.
    inline_css : bool
        Embed the stylesheet. Only ``True`` is supported.
    include_analytics : bool
        Emit the analytics snippet when an analytics id is configured.
    include_adsense : bool
        Emit the ad verification meta and loader script when a client id is
        configured.
    form_service : FormService
        Backend the call-to-action form submits to.
    include_animations : bool
        Emit keyframe animations and their utility classes.
    """

    minify: bool = True
    inline_css: bool = True
    include_analytics: bool = False
    include_adsense: bool = False
    form_service: FormService = FormService.CUSTOM_ENDPOINT
    include_animations: bool = True


@dc.dataclass(frozen=True, slots=True)
class GenerationMetadata:
    """Provenance attached to a compiled document."""

    generated_at: str
    version: str
    checksum: str


@dc.dataclass(frozen=True, slots=True)
class GeneratedOutput:
    """A compiled document with its size, advisory warnings, and metadata."""

    html: str
    size: int
    warnings: tuple[str, ...]
    metadata: GenerationMetadata


__all__ = [
    "Alignment",
    "BackgroundType",
    "ButtonAction",
    "CallToActionData",
    "CallToActionSection",
    "ContentData",
    "ContentSection",
    "FontFamily",
    "FormFields",
    "FormService",
    "GeneratedOutput",
    "GenerationMetadata",
    "GeneratorOptions",
    "GlobalStyles",
    "HeroData",
    "HeroSection",
    "ImagePosition",
    "PageMetadata",
    "PageModel",
    "PageModelError",
    "Padding",
    "Section",
    "UnknownSection",
]
