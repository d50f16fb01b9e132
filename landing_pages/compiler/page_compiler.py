"""Compile a page model into one self-contained HTML document.

:class:`PageCompiler` wires the section renderers, stylesheet generator,
form-handler generator, vendor snippets, assembler, optimizer, and validator
into a single synchronous pipeline. All templates and base stylesheets arrive
through an immutable :class:`~landing_pages.compiler.assets.CompilerAssets`
loaded once, so one compiler instance can serve concurrent callers.

Example
-------
>>> from pathlib import Path
>>> from landing_pages.compiler import CompilerAssets, PageCompiler
>>> from landing_pages.model import load_page_model
>>> compiler = PageCompiler(CompilerAssets.load())  # doctest: +SKIP
>>> output = compiler.compile(load_page_model(Path("page.yaml")))  # doctest: +SKIP
>>> output.html.startswith("<!DOCTYPE html>")  # doctest: +SKIP
True
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ

from landing_pages._constants import GENERATOR_VERSION
from landing_pages.model import (
    CallToActionSection,
    GeneratedOutput,
    GenerationMetadata,
    GeneratorOptions,
)
from landing_pages.settings import VendorSettings

from .assembler import DocumentHead, DocumentParts, assemble
from .assets import SHELL_TEMPLATE
from .checksum import checksum
from .css import CssGenerator
from .escaping import neutralize_script_text
from .forms import FormHandlerGenerator
from .optimizer import optimize
from .sections import RenderContext, SectionRenderer, order_sections
from .snippets import SnippetRenderer
from .validator import validate

if typ.TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from landing_pages.model import PageModel, Section, UnknownSection

    from .assets import CompilerAssets

logger = logging.getLogger(__name__)

INLINE_CSS_WARNING = (
    "External stylesheets are not supported; CSS was embedded inline instead"
)


class GenerationError(RuntimeError):
    """Raised when any stage of page compilation fails."""


def utc_now() -> dt.datetime:
    """Return the current time in UTC."""
    return dt.datetime.now(dt.UTC)


def epoch_millis(moment: dt.datetime) -> int:
    """Return ``moment`` as whole milliseconds since the Unix epoch."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=dt.UTC)
    return int(moment.timestamp() * 1000)


def iso_timestamp(moment: dt.datetime) -> str:
    """Render ``moment`` as an ISO-8601 UTC timestamp with milliseconds."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=dt.UTC)
    text = moment.astimezone(dt.UTC).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


class PageCompiler:
    """Turn :class:`~landing_pages.model.PageModel` values into HTML documents.

    Parameters
    ----------
    assets : CompilerAssets
        Preloaded templates and base stylesheets; shared, never mutated.
    settings : VendorSettings, optional
        Analytics and ad identifiers; unset identifiers disable their
        snippets regardless of the options.
    clock : Callable[[], datetime], optional
        Source of the build time. Tests inject a fixed clock so that output
        is byte-for-byte reproducible.
    """

    def __init__(
        self,
        assets: CompilerAssets,
        *,
        settings: VendorSettings | None = None,
        clock: Callable[[], dt.datetime] = utc_now,
    ) -> None:
        self.assets = assets
        self.settings = settings or VendorSettings()
        self.clock = clock
        self._sections = SectionRenderer(assets)
        self._css = CssGenerator(assets.base_stylesheets)
        self._forms = FormHandlerGenerator(assets)
        self._snippets = SnippetRenderer(assets, self.settings)
        self._shell = assets.template(SHELL_TEMPLATE)
        self._smooth_scroll = assets.template("scripts/smooth_scroll.js")

    def compile(
        self, page: PageModel, options: GeneratorOptions | None = None
    ) -> GeneratedOutput:
        """Compile ``page`` into a document.

        Parameters
        ----------
        page : PageModel
            The page to compile; never mutated.
        options : GeneratorOptions, optional
            Compilation flags; defaults to :class:`GeneratorOptions` defaults.

        Returns
        -------
        GeneratedOutput
            The document, its UTF-8 size, advisory warnings, and metadata.

        Raises
        ------
        GenerationError
            If any stage fails. No partial output is returned.
        """
        options = options or GeneratorOptions()
        try:
            return self._compile(page, options)
        except Exception as exc:
            msg = f"Page generation failed: {exc}"
            raise GenerationError(msg) from exc

    def _compile(self, page: PageModel, options: GeneratorOptions) -> GeneratedOutput:
        moment = self.clock()
        warnings: list[str] = []
        if not options.inline_css:
            warnings.append(INLINE_CSS_WARNING)

        sections = order_sections(page.sections)
        context = RenderContext.for_sections(
            sections,
            page_id=page.id,
            build_stamp=epoch_millis(moment),
            form_service=options.form_service,
            animate=options.include_animations,
        )
        body = self._sections.render_all(sections, context)
        css = self._css.generate(page.theme, options)
        script = self._build_script(sections, options, context)
        snippets = self._snippets.render(options)
        logger.debug(
            "rendered %s: body=%d css=%d script=%d chars",
            page.id,
            len(body),
            len(css),
            len(script),
        )

        html = assemble(
            self._shell,
            DocumentParts(
                body=body,
                css=css,
                script=script,
                head_snippets=snippets.head,
                body_snippets=snippets.body,
            ),
            DocumentHead.from_page(page),
        )
        if options.minify:
            html = optimize(html)

        findings = validate(html)
        if findings:
            logger.warning("%s: %d validation warning(s)", page.id, len(findings))
        warnings.extend(findings)

        size = len(html.encode("utf-8"))
        logger.info("compiled %s (%d bytes)", page.id, size)
        return GeneratedOutput(
            html=html,
            size=size,
            warnings=tuple(warnings),
            metadata=GenerationMetadata(
                generated_at=iso_timestamp(moment),
                version=GENERATOR_VERSION,
                checksum=checksum(html),
            ),
        )

    def _build_script(
        self,
        sections: Sequence[Section | UnknownSection],
        options: GeneratorOptions,
        context: RenderContext,
    ) -> str:
        """Join the smooth-scroll helper and one submit handler per form."""
        scripts = [neutralize_script_text(self._smooth_scroll.render().strip())]
        scripts.extend(
            self._forms.render(section, options.form_service, context)
            for section in sections
            if isinstance(section, CallToActionSection) and section.data.form_enabled
        )
        return "\n\n".join(script for script in scripts if script)


__all__ = [
    "INLINE_CSS_WARNING",
    "GenerationError",
    "PageCompiler",
    "epoch_millis",
    "iso_timestamp",
    "utc_now",
]
