"""Combine rendered parts into one self-contained HTML document."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from landing_pages._constants import CSP_POLICY, DEFAULT_PAGE_TITLE, GENERATOR_VERSION

if typ.TYPE_CHECKING:
    from jinja2 import Template

    from landing_pages.model import PageModel


@dc.dataclass(frozen=True, slots=True)
class DocumentHead:
    """Title and SEO metadata placed in ``<head>``; escaped on render."""

    title: str = DEFAULT_PAGE_TITLE
    description: str = ""
    favicon: str | None = None

    @classmethod
    def from_page(cls, page: PageModel) -> DocumentHead:
        """Build the head from ``page``, defaulting an empty title."""
        return cls(
            title=page.title.strip() or DEFAULT_PAGE_TITLE,
            description=page.metadata.description,
            favicon=page.metadata.favicon or None,
        )


@dc.dataclass(frozen=True, slots=True)
class DocumentParts:
    """Pre-rendered pieces of a page.

    Attributes
    ----------
    body : str
        Concatenated section markup.
    css : str
        Stylesheet text, already neutralized for a ``<style>`` element.
    script : str
        Script text, already neutralized for a ``<script>`` element. When
        empty, no inline ``<script>`` element is emitted.
    head_snippets : str
        Vendor markup for the end of ``<head>``.
    body_snippets : str
        Vendor markup for the end of ``<body>``.
    """

    body: str
    css: str
    script: str = ""
    head_snippets: str = ""
    body_snippets: str = ""


def assemble(shell: Template, parts: DocumentParts, head: DocumentHead) -> str:
    """Render the page shell around ``parts``.

    Parameters
    ----------
    shell : jinja2.Template
        The preloaded ``page_shell.jinja`` template.
    parts : DocumentParts
        Rendered body, stylesheet, script, and vendor snippets. These are
        trusted markup and inserted verbatim.
    head : DocumentHead
        Title, description, and favicon, escaped by the template.

    Returns
    -------
    str
        The complete document, starting with ``<!DOCTYPE html>``.
    """
    return shell.render(
        csp_policy=CSP_POLICY,
        version=GENERATOR_VERSION,
        title=head.title,
        description=head.description,
        favicon=head.favicon,
        css=parts.css,
        body=parts.body,
        script=parts.script,
        head_snippets=parts.head_snippets,
        body_snippets=parts.body_snippets,
    )


__all__ = ["DocumentHead", "DocumentParts", "assemble"]
