"""Load and validate landing page models for the static page compiler.

This subpackage parses the editor's exported page documents (JSON or YAML),
maps its camelCase wire shape onto frozen dataclasses (:class:`PageModel`,
:class:`HeroSection`, :class:`CallToActionSection`, etc.), and defines the
option and output records the compiler exchanges with its callers. The primary
entry point is :func:`load_page_model`.

Examples
--------
>>> from pathlib import Path
>>> from landing_pages.model import load_page_model
>>> page = load_page_model(Path("pages/spring-sale.json"))  # doctest: +SKIP
>>> page.sections[0].kind  # doctest: +SKIP
'hero'
"""

from .loader import load_page_model, parse_page_model
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
    FormService,
    GeneratedOutput,
    GenerationMetadata,
    GeneratorOptions,
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
    "Padding",
    "PageMetadata",
    "PageModel",
    "PageModelError",
    "Section",
    "UnknownSection",
    "load_page_model",
    "parse_page_model",
]
