"""Best-effort, text-level size optimizations for compiled pages.

The optimizer never parses HTML; it applies a fixed sequence of regular
expression passes. Elements whose content is whitespace- or
syntax-sensitive (``pre``, ``textarea``, ``script`` and ``style``) are
shielded behind placeholders while the markup-level passes run, and only the
dedicated :func:`minify_styles` and :func:`minify_scripts` passes touch their
content.

Examples
--------
>>> optimize("<p>\\n  Hello   <!-- note -->world\\n</p>")
'<p> Hello world </p>'
"""

from __future__ import annotations

import logging
import re
import typing as typ

if typ.TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_SHIELDED = re.compile(
    r"<(pre|textarea|script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)
_PLACEHOLDER = re.compile("<\x00(\\d+)\x00>")

_COMMENT = re.compile(r"<!--(?!\[if\b)(?!<!)[\s\S]*?-->")
_WHITESPACE = re.compile(r"\s+")
_BETWEEN_TAGS = re.compile(r">\s+<")

_STYLE_ELEMENT = re.compile(
    r"(<style\b[^>]*>)(.*?)(</style\s*>)", re.IGNORECASE | re.DOTALL
)
_SCRIPT_ELEMENT = re.compile(
    r"(<script\b([^>]*)>)(.*?)(</script\s*>)", re.IGNORECASE | re.DOTALL
)
_SRC_ATTRIBUTE = re.compile(r"\bsrc\s*=", re.IGNORECASE)

_CSS_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_CSS_PUNCTUATION = re.compile(r"\s*([{};,>])\s*")
_CSS_COLON = re.compile(r":\s+")
_CSS_LEADING_ZERO = re.compile(r"(?<![\w.#-])0+(\.\d+)")

_TAG = re.compile(r"<[A-Za-z][^<>]*>")
_EMPTY_ATTRIBUTE = re.compile(r"\s+([\w:.-]+)\s*=\s*(?:\"\"|'')")
_META = re.compile(r"<meta\b[^>]*>", re.IGNORECASE)
_META_KEY = re.compile(
    r"""\b(name|property|http-equiv)\s*=\s*(?:"([^"]*)"|'([^']*)')""",
    re.IGNORECASE,
)
_IMG = re.compile(r"<img\b([^>]*?)\s*(/?)>", re.IGNORECASE)

# Whitespace next to these characters never separates two JavaScript tokens.
_JS_OPENERS = frozenset("{;,([")
_JS_CLOSERS = frozenset("});,]")
_JS_TIGHT_AFTER = frozenset("=:")
_JS_TIGHT_BEFORE = frozenset("=:{")


def _shielded(html: str, transform: Callable[[str], str]) -> str:
    """Apply ``transform`` with sensitive elements replaced by placeholders."""
    saved: list[str] = []

    def _stash(match: re.Match[str]) -> str:
        saved.append(match.group(0))
        return f"<\x00{len(saved) - 1}\x00>"

    masked = _SHIELDED.sub(_stash, html.replace("\x00", ""))
    result = transform(masked)
    return _PLACEHOLDER.sub(lambda match: saved[int(match.group(1))], result)


def strip_comments(html: str) -> str:
    """Remove HTML comments, keeping conditional comments."""
    return _shielded(html, lambda text: _COMMENT.sub("", text))


def _collapse(text: str) -> str:
    text = _WHITESPACE.sub(" ", text)
    return _BETWEEN_TAGS.sub("><", text).strip()


def collapse_whitespace(html: str) -> str:
    """Collapse whitespace runs and drop whitespace between tags.

    Applying the pass twice yields the same result as applying it once.
    """
    return _shielded(html, _collapse)


def minify_css(css: str) -> str:
    """Return ``css`` without comments and redundant whitespace."""
    text = _CSS_COMMENT.sub("", css)
    text = _WHITESPACE.sub(" ", text)
    text = _CSS_PUNCTUATION.sub(r"\1", text)
    text = _CSS_COLON.sub(":", text)
    text = text.replace(";}", "}")
    text = _CSS_LEADING_ZERO.sub(r"\1", text)
    return text.strip()


def minify_styles(html: str) -> str:
    """Minify the content of every ``<style>`` element."""
    return _STYLE_ELEMENT.sub(
        lambda match: f"{match.group(1)}{minify_css(match.group(2))}{match.group(3)}",
        html,
    )


def _string_end(source: str, start: int) -> int:
    quote = source[start]
    index = start + 1
    while index < len(source):
        char = source[index]
        if char == "\\":
            index += 2
            continue
        if char == quote:
            return index + 1
        if char == "\n" and quote != "`":
            return index
        index += 1
    return len(source)


def _separator(previous: str, following: str, pending: str) -> str:
    if not previous or previous in _JS_OPENERS or following in _JS_CLOSERS:
        return ""
    if pending == " " and (
        previous in _JS_TIGHT_AFTER or following in _JS_TIGHT_BEFORE
    ):
        return ""
    return pending


def minify_js(source: str) -> str:
    """Return ``source`` without comments and redundant whitespace.

    The scanner understands string and template literals, so ``//`` inside a
    URL string is kept. Whitespace runs that contain a newline collapse to a
    single newline, which keeps automatic semicolon insertion intact. Regular
    expression literals are not recognized.
    """
    out: list[str] = []
    pending = ""
    index = 0
    length = len(source)

    def _emit(token: str) -> None:
        nonlocal pending
        previous = out[-1][-1] if out else ""
        if pending:
            out.append(_separator(previous, token[0], pending))
            pending = ""
        out.append(token)

    while index < length:
        char = source[index]
        following = source[index + 1] if index + 1 < length else ""
        if char in "'\"`":
            end = _string_end(source, index)
            _emit(source[index:end])
            index = end
        elif char == "/" and following == "/":
            newline = source.find("\n", index)
            index = length if newline == -1 else newline
        elif char == "/" and following == "*":
            close = source.find("*/", index + 2)
            end = length if close == -1 else close + 2
            if "\n" in source[index:end]:
                pending = "\n"
            elif not pending:
                pending = " "
            index = end
        elif char.isspace():
            end = index
            while end < length and source[end].isspace():
                end += 1
            if "\n" in source[index:end]:
                pending = "\n"
            elif not pending:
                pending = " "
            index = end
        else:
            _emit(char)
            index += 1
    return "".join(part for part in out if part)


def minify_scripts(html: str) -> str:
    """Minify inline ``<script>`` elements; external scripts are untouched."""

    def _replace(match: re.Match[str]) -> str:
        if _SRC_ATTRIBUTE.search(match.group(2)):
            return match.group(0)
        return f"{match.group(1)}{minify_js(match.group(3))}{match.group(4)}"

    return _SCRIPT_ELEMENT.sub(_replace, html)


def _drop_in_tag(match: re.Match[str]) -> str:
    return _EMPTY_ATTRIBUTE.sub(
        lambda attr: attr.group(0) if attr.group(1).lower() == "alt" else "",
        match.group(0),
    )


def drop_empty_attributes(html: str) -> str:
    """Remove attributes whose value is empty, except ``alt``."""
    return _shielded(html, lambda text: _TAG.sub(_drop_in_tag, text))


def _meta_key(tag: str) -> str | None:
    found: dict[str, str] = {}
    for match in _META_KEY.finditer(tag):
        value = match.group(2) if match.group(2) is not None else match.group(3)
        found.setdefault(match.group(1).lower(), value)
    for attribute in ("name", "property", "http-equiv"):
        if found.get(attribute):
            return found[attribute].lower()
    return None


def dedupe_meta(html: str) -> str:
    """Drop repeated ``<meta>`` tags; the first tag per key wins.

    The key is the ``name``, ``property`` or ``http-equiv`` value compared
    case-insensitively. Tags without a key (``charset``) are always kept.
    """
    seen: set[str] = set()

    def _dedupe(match: re.Match[str]) -> str:
        key = _meta_key(match.group(0))
        if key is None:
            return match.group(0)
        if key in seen:
            return ""
        seen.add(key)
        return match.group(0)

    return _shielded(html, lambda text: _META.sub(_dedupe, text))


def _hint(match: re.Match[str]) -> str:
    attributes = match.group(1)
    lowered = attributes.lower()
    if "loading=" not in lowered:
        attributes += ' loading="lazy"'
    if "decoding=" not in lowered:
        attributes += ' decoding="async"'
    return f"<img{attributes}{match.group(2)}>"


def hint_images(html: str) -> str:
    """Add lazy-loading and async-decoding hints to images lacking them."""
    return _shielded(html, lambda text: _IMG.sub(_hint, text))


PASSES: tuple[Callable[[str], str], ...] = (
    strip_comments,
    collapse_whitespace,
    minify_styles,
    minify_scripts,
    drop_empty_attributes,
    dedupe_meta,
    hint_images,
)


def optimize(html: str) -> str:
    """Run every optimization pass over ``html`` in order."""
    for step in PASSES:
        before = len(html)
        html = step(html)
        logger.debug("%s: %d -> %d chars", step.__name__, before, len(html))
    return html


__all__ = [
    "PASSES",
    "collapse_whitespace",
    "dedupe_meta",
    "drop_empty_attributes",
    "hint_images",
    "minify_css",
    "minify_js",
    "minify_scripts",
    "minify_styles",
    "optimize",
    "strip_comments",
]
