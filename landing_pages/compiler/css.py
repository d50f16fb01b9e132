"""Compose the embedded stylesheet from base sheets and the page theme."""

from __future__ import annotations

import textwrap
import typing as typ

from .escaping import neutralize_style_text

if typ.TYPE_CHECKING:
    from collections.abc import Sequence

    from landing_pages.model import GeneratorOptions, GlobalStyles

FORM_RULES = textwrap.dedent(
    """\
    .form-container {
      display: flex;
      flex-direction: column;
      gap: 1rem;
      max-width: 500px;
      margin: 0 auto;
    }

    .form-field {
      width: 100%;
      padding: 14px 16px;
      border: 2px solid var(--border-color);
      border-radius: 8px;
      font-size: 16px;
      font-family: inherit;
      transition: all 0.3s ease;
      background: white;
    }

    .form-field:focus {
      outline: none;
      border-color: var(--primary-color);
      box-shadow: 0 0 0 3px rgba(59, 130, 246, 0.1);
    }

    .form-field.error {
      border-color: #dc2626;
    }

    .btn {
      display: inline-flex;
      align-items: center;
      justify-content: center;
      padding: 14px 28px;
      font-size: 16px;
      font-weight: 600;
      text-align: center;
      border-radius: 8px;
      border: none;
      cursor: pointer;
      text-decoration: none;
      transition: all 0.2s ease;
      min-height: 48px;
      font-family: inherit;
    }

    .btn:hover:not(:disabled) {
      transform: translateY(-2px);
      box-shadow: 0 10px 20px rgba(0, 0, 0, 0.15);
    }

    .btn:active {
      transform: translateY(0);
    }

    .btn:disabled {
      opacity: 0.6;
      cursor: not-allowed;
      transform: none !important;
    }

    @media (max-width: 768px) {
      .btn {
        width: 100%;
        padding: 16px 24px;
      }
    }
    """
)

ANIMATION_RULES = textwrap.dedent(
    """\
    .animate-fade-in {
      animation: fadeIn 0.8s ease-out;
    }

    .animate-slide-in-left {
      animation: slideInLeft 0.8s ease-out;
    }

    .animate-slide-in-right {
      animation: slideInRight 0.8s ease-out;
    }

    @keyframes fadeIn {
      from {
        opacity: 0;
        transform: translateY(30px);
      }
      to {
        opacity: 1;
        transform: translateY(0);
      }
    }

    @keyframes slideInLeft {
      from {
        opacity: 0;
        transform: translateX(-50px);
      }
      to {
        opacity: 1;
        transform: translateX(0);
      }
    }

    @keyframes slideInRight {
      from {
        opacity: 0;
        transform: translateX(50px);
      }
      to {
        opacity: 1;
        transform: translateX(0);
      }
    }
    """
)

REDUCED_MOTION_RULES = textwrap.dedent(
    """\
    @media (prefers-reduced-motion: reduce) {
      * {
        animation: none !important;
        transition: none !important;
      }
    }
    """
)

PRINT_RULES = textwrap.dedent(
    """\
    @media print {
      .hero-section {
        min-height: auto !important;
      }

      .btn,
      .form-container {
        display: none !important;
      }

      * {
        color: black !important;
        background: white !important;
      }
    }
    """
)


class CssGenerator:
    """Build the stylesheet embedded into every compiled page.

    Parameters
    ----------
    base_sheets : Sequence[tuple[str, str]]
        ``(name, css)`` pairs loaded once by
        :class:`~landing_pages.compiler.assets.CompilerAssets`; emitted first,
        in order.
    """

    def __init__(self, base_sheets: Sequence[tuple[str, str]]) -> None:
        self._base = tuple(css.strip() for _, css in base_sheets)

    def generate(self, theme: GlobalStyles, options: GeneratorOptions) -> str:
        """Return the stylesheet for ``theme`` honouring ``options``.

        The output cannot terminate its ``<style>`` element even when theme
        colors carry markup.
        """
        blocks = [
            *self._base,
            theme_rules(theme),
            FORM_RULES,
        ]
        if options.include_animations:
            blocks.append(ANIMATION_RULES)
        blocks.extend((REDUCED_MOTION_RULES, PRINT_RULES))
        css = "\n\n".join(block.strip() for block in blocks if block.strip())
        return neutralize_style_text(css)


def theme_rules(theme: GlobalStyles) -> str:
    """Return the body font rule and the ``:root`` custom properties."""
    return (
        "body {\n"
        f"  font-family: {theme.font_family.stack};\n"
        "  color: #333333;\n"
        "  line-height: 1.6;\n"
        "  overflow-x: hidden;\n"
        "}\n\n"
        ":root {\n"
        f"  --primary-color: {theme.primary_color};\n"
        f"  --secondary-color: {theme.secondary_color};\n"
        "  --text-dark: #1f2937;\n"
        "  --text-light: #6b7280;\n"
        "  --bg-light: #f9fafb;\n"
        "  --border-color: #e5e7eb;\n"
        "}\n"
    )


__all__ = ["CssGenerator", "theme_rules"]
