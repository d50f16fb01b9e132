"""Read-only templates and stylesheets loaded once per compiler.

:class:`CompilerAssets` is built a single time, resolves every template the
pipeline uses, and reads the base stylesheets into memory. Because nothing is
loaded lazily, a missing asset fails at construction rather than halfway
through a page, and concurrent compilations share the same immutable state.

>>> assets = CompilerAssets.load()  # doctest: +SKIP
>>> assets.base_stylesheets[0][0]  # doctest: +SKIP
'reset'
"""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    select_autoescape,
)
from markupsafe import Markup

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

BASE_STYLESHEETS = ("reset", "utilities", "responsive")

SHELL_TEMPLATE = "page_shell.jinja"
SECTION_TEMPLATES = {
    "hero": "sections/hero.jinja",
    "content": "sections/content.jinja",
    "cta": "sections/cta.jinja",
}
SCRIPT_TEMPLATES = (
    "scripts/form_base.js",
    "scripts/smooth_scroll.js",
    "scripts/hosted_form_service.js",
    "scripts/platform_native_forms.js",
    "scripts/custom_endpoint.js",
)
SNIPPET_TEMPLATES = (
    "snippets/analytics.jinja",
    "snippets/adsense_head.jinja",
    "snippets/adsense_body.jinja",
)


def raw_style(value: object | None) -> Markup:
    """Mark a theme value for verbatim insertion into a ``style`` attribute.

    Colors, gradients, and image URLs are author data that is not validated
    as CSS; a value containing quotes can break out of its attribute.
    """
    return Markup("" if value is None else str(value))


def build_environment(templates_dir: Path) -> Environment:
    """Return the Jinja environment shared by every compiler stage.

    Markup templates (``*.jinja``) autoescape; script templates (``*.js``)
    do not and interpolate values through the ``tojson`` filter instead.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(
            enabled_extensions=("html", "xml", "jinja"),
            default_for_string=True,
            default=False,
        ),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters["raw_style"] = raw_style
    return env


@dc.dataclass(frozen=True, slots=True)
class CompilerAssets:
    """Preloaded Jinja environment, templates, and base stylesheets."""

    env: Environment
    templates: dict[str, Template]
    base_stylesheets: tuple[tuple[str, str], ...]

    @classmethod
    def load(cls, templates_dir: Path | None = None) -> CompilerAssets:
        """Load every template and stylesheet from ``templates_dir``.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory holding ``page_shell.jinja`` and the ``sections``,
            ``scripts``, ``snippets`` and ``styles`` folders. Defaults to the
            packaged ``landing_pages/templates``.

        Raises
        ------
        jinja2.TemplateNotFound
            If any required template or stylesheet is missing.
        """
        env = build_environment(templates_dir or DEFAULT_TEMPLATES_DIR)
        names = [SHELL_TEMPLATE, *SECTION_TEMPLATES.values(), *SCRIPT_TEMPLATES]
        names.extend(SNIPPET_TEMPLATES)
        templates = {name: env.get_template(name) for name in names}
        sheets = tuple(
            (name, env.loader.get_source(env, f"styles/{name}.css")[0])
            for name in BASE_STYLESHEETS
        )
        return cls(env=env, templates=templates, base_stylesheets=sheets)

    def template(self, name: str) -> Template:
        """Return the preloaded template called ``name``."""
        return self.templates[name]


__all__ = [
    "BASE_STYLESHEETS",
    "DEFAULT_TEMPLATES_DIR",
    "SCRIPT_TEMPLATES",
    "SECTION_TEMPLATES",
    "SHELL_TEMPLATE",
    "SNIPPET_TEMPLATES",
    "CompilerAssets",
    "build_environment",
    "raw_style",
]
