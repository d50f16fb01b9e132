"""Generate the client-side submit handler for call-to-action forms.

Each backend is a small strategy naming its script template and the values
that template interpolates. Every strategy extends ``scripts/form_base.js``,
which owns the ``idle -> sending -> success | error`` state machine, so the
backends differ only in how a submission leaves the page.

Values reach the scripts through Jinja's ``tojson`` filter and the rendered
text is passed through :func:`neutralize_script_text`, so author-controlled
strings can neither break out of a JavaScript literal nor close the
surrounding ``<script>`` element.

Examples
--------
>>> generator = FormHandlerGenerator(CompilerAssets.load())  # doctest: +SKIP
>>> script = generator.render(cta, FormService.CUSTOM_ENDPOINT, ctx)  # doctest: +SKIP
>>> SUBMISSION_ORIGIN in script  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from landing_pages._constants import (
    FORM_RESET_DELAY_MS,
    HOSTED_FORM_ENDPOINT,
    SUBMISSION_ENDPOINT,
)
from landing_pages.model import FormService

from .checksum import checksum
from .escaping import neutralize_script_text
from .sections import form_element_id, form_message_id

if typ.TYPE_CHECKING:
    from landing_pages.model import CallToActionSection

    from .assets import CompilerAssets
    from .sections import RenderContext

HOSTED_FORM_KEY_LENGTH = 8


def hosted_form_key(recipient_email: str) -> str:
    """Return the hosted-form-service key derived from ``recipient_email``."""
    return checksum(recipient_email)[:HOSTED_FORM_KEY_LENGTH]


class FormStrategy(typ.Protocol):
    """A submission backend for call-to-action forms."""

    template: str
    event_label: str

    def variables(
        self, section: CallToActionSection, context: RenderContext
    ) -> dict[str, typ.Any]:
        """Return the backend-specific template variables."""
        ...


@dc.dataclass(frozen=True, slots=True)
class HostedFormServiceStrategy:
    """Submit through a third-party form collector keyed by the recipient."""

    template: str = "scripts/hosted_form_service.js"
    event_label: str = "hosted_form"

    def variables(
        self, section: CallToActionSection, context: RenderContext
    ) -> dict[str, typ.Any]:
        key = hosted_form_key(section.data.recipient_email)
        return {"endpoint": HOSTED_FORM_ENDPOINT.format(key=key)}


@dc.dataclass(frozen=True, slots=True)
class PlatformNativeFormsStrategy:
    """Let the static host capture the POST; the script only drives the UI."""

    template: str = "scripts/platform_native_forms.js"
    event_label: str = "platform_form"

    def variables(
        self, section: CallToActionSection, context: RenderContext
    ) -> dict[str, typ.Any]:
        return {"form_name": form_element_id(section)}


@dc.dataclass(frozen=True, slots=True)
class CustomEndpointStrategy:
    """POST a JSON submission to the generator's own submission endpoint."""

    template: str = "scripts/custom_endpoint.js"
    event_label: str = "custom_form"

    def variables(
        self, section: CallToActionSection, context: RenderContext
    ) -> dict[str, typ.Any]:
        return {
            "endpoint": SUBMISSION_ENDPOINT,
            "recipient_email": section.data.recipient_email,
        }


STRATEGIES: dict[FormService, FormStrategy] = {
    FormService.HOSTED_FORM_SERVICE: HostedFormServiceStrategy(),
    FormService.PLATFORM_NATIVE_FORMS: PlatformNativeFormsStrategy(),
    FormService.CUSTOM_ENDPOINT: CustomEndpointStrategy(),
}


class FormHandlerGenerator:
    """Render submit scripts from the preloaded script templates."""

    def __init__(self, assets: CompilerAssets) -> None:
        self._assets = assets

    def render(
        self,
        section: CallToActionSection,
        backend: FormService,
        context: RenderContext,
    ) -> str:
        """Return the submit handler for ``section`` wired to ``backend``.

        Parameters
        ----------
        section : CallToActionSection
            A form-enabled call-to-action block.
        backend : FormService
            Submission backend selecting the strategy.
        context : RenderContext
            Page-level render facts.

        Returns
        -------
        str
            Script text safe to embed in a ``<script>`` element.
        """
        strategy = STRATEGIES[FormService.parse(backend)]
        script = self._assets.template(strategy.template).render(
            form_id=form_element_id(section),
            message_id=form_message_id(section),
            button_text=section.data.button_text,
            reset_delay_ms=FORM_RESET_DELAY_MS,
            event_label=strategy.event_label,
            **strategy.variables(section, context),
        )
        return neutralize_script_text(script.strip())


__all__ = [
    "STRATEGIES",
    "CustomEndpointStrategy",
    "FormHandlerGenerator",
    "FormStrategy",
    "HostedFormServiceStrategy",
    "PlatformNativeFormsStrategy",
    "hosted_form_key",
]
