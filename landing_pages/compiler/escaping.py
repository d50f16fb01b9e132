"""Context-specific escaping for text embedded in generated documents."""

from __future__ import annotations

import re

_SCRIPT_CLOSE = re.compile(r"</(script)", re.IGNORECASE)
_STYLE_CLOSE = re.compile(r"</(style)", re.IGNORECASE)


def neutralize_script_text(script: str) -> str:
    """Return ``script`` safe to place inside a ``<script>`` element.

    Rewrites ``</script``, ``<!--`` and ``-->`` so the HTML tokenizer can
    neither close the element early nor enter the escaped-script state. Every
    rewrite only adds a backslash, which JavaScript string literals ignore.

    >>> neutralize_script_text("var s = '</script><!-- x -->';")
    "var s = '<\\\\/script><\\\\!-- x --\\\\>';"
    """
    neutral = _SCRIPT_CLOSE.sub(r"<\\/\1", script)
    neutral = neutral.replace("<!--", "<\\!--")
    return neutral.replace("-->", "--\\>")


def neutralize_style_text(css: str) -> str:
    """Return ``css`` unable to terminate its ``<style>`` element."""
    return _STYLE_CLOSE.sub(r"<\\/\1", css)


__all__ = ["neutralize_script_text", "neutralize_style_text"]
