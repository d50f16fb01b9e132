"""Vendor snippets inserted into the document head and body."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from landing_pages.model import GeneratorOptions
    from landing_pages.settings import VendorSettings

    from .assets import CompilerAssets


@dc.dataclass(frozen=True, slots=True)
class VendorSnippets:
    """Rendered markup for each vendor insertion point; empty when unused."""

    head: str = ""
    body: str = ""


class SnippetRenderer:
    """Render analytics and ad snippets when enabled and configured."""

    def __init__(self, assets: CompilerAssets, settings: VendorSettings) -> None:
        self._assets = assets
        self._settings = settings

    def render(self, options: GeneratorOptions) -> VendorSnippets:
        """Return the snippets ``options`` asks for.

        A snippet is emitted only when its option is set *and* the matching
        vendor id is configured; otherwise its insertion point stays empty.
        """
        head: list[str] = []
        body: list[str] = []
        measurement_id = self._settings.analytics_id
        if options.include_analytics and measurement_id:
            head.append(
                self._render("snippets/analytics.jinja", measurement_id=measurement_id)
            )
        client_id = self._settings.adsense_client_id
        if options.include_adsense and client_id:
            head.append(self._render("snippets/adsense_head.jinja", client_id=client_id))
            body.append(self._render("snippets/adsense_body.jinja", client_id=client_id))
        return VendorSnippets(head="\n".join(head), body="\n".join(body))

    def _render(self, name: str, **variables: str) -> str:
        return self._assets.template(name).render(**variables).strip()


__all__ = ["SnippetRenderer", "VendorSnippets"]
