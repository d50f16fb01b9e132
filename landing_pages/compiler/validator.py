"""Advisory structural checks over a compiled document.

:func:`validate` never raises and never blocks generation: every finding is a
human-readable warning string. :func:`analyze_performance` adds rough size
and asset recommendations for the CLI.
"""

from __future__ import annotations

import collections
import dataclasses as dc
import re

from landing_pages._constants import SIZE_WARNING_BYTES

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

TEXT_INPUT_TYPES = frozenset({"text", "email", "tel", "search", "url", "password"})

_RAW_TEXT = re.compile(
    r"(<(script|style)\b[^>]*>).*?(</\2\s*>)", re.IGNORECASE | re.DOTALL
)
_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_OPEN_TAG = re.compile(r"<([a-zA-Z][a-zA-Z0-9-]*)(?=[\s/>])")
_CLOSE_TAG = re.compile(r"</([a-zA-Z][a-zA-Z0-9-]*)\s*>")
_VIEWPORT = re.compile(r"<meta\b[^>]*\bname\s*=\s*[\"']?viewport", re.IGNORECASE)
_IMG = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_STYLE_BLOCK = re.compile(r"<style\b.*?</style\s*>", re.IGNORECASE | re.DOTALL)
_SCRIPT_BLOCK = re.compile(r"<script\b.*?</script\s*>", re.IGNORECASE | re.DOTALL)
_INPUT = re.compile(r"<input\b[^>]*>", re.IGNORECASE)
_LABEL_FOR = re.compile(
    r"<label\b[^>]*\bfor\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE
)


def _attribute(tag: str, name: str) -> str | None:
    match = re.search(
        rf"""(?<![\w-]){re.escape(name)}\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s>]+))""",
        tag,
        re.IGNORECASE,
    )
    if match is None:
        return None
    return next(group for group in match.groups() if group is not None)


def _has_attribute(tag: str, name: str) -> bool:
    pattern = rf"\s{re.escape(name)}(?=[\s=/>])"
    return re.search(pattern, tag, re.IGNORECASE) is not None


def _markup_only(html: str) -> str:
    """Return ``html`` with comments and script/style content removed."""
    without_comments = _COMMENT.sub("", html)
    return _RAW_TEXT.sub(
        lambda match: match.group(1) + match.group(3), without_comments
    )


def _check_required(html: str) -> list[str]:
    lowered = html.lower()
    warnings = []
    if "<!doctype html>" not in lowered:
        warnings.append("Missing DOCTYPE declaration")
    for tag, needle in (("html", "<html"), ("head", "<head>"), ("body", "<body>")):
        if needle not in lowered:
            warnings.append(f"Missing {tag} tag")
    if "<title>" not in lowered:
        warnings.append("Missing title tag")
    if not _VIEWPORT.search(html):
        warnings.append("Missing viewport meta tag")
    return warnings


def _check_balance(markup: str) -> list[str]:
    counts: collections.Counter[str] = collections.Counter()
    for match in _OPEN_TAG.finditer(markup):
        name = match.group(1).lower()
        if name not in VOID_ELEMENTS:
            counts[name] += 1
    for match in _CLOSE_TAG.finditer(markup):
        counts[match.group(1).lower()] -= 1
    warnings = []
    for name in sorted(counts):
        count = counts[name]
        if count > 0:
            warnings.append(f"Unclosed tag: {name} ({count} unclosed)")
        elif count < 0:
            warnings.append(f"Extra closing tag: {name} ({-count} extra)")
    return warnings


def _check_size(html: str) -> list[str]:
    size = len(html.encode("utf-8"))
    if size > SIZE_WARNING_BYTES:
        return [
            f"HTML file size ({round(size / 1024)}KB) exceeds recommended "
            f"{SIZE_WARNING_BYTES // 1024}KB"
        ]
    return []


def _check_accessibility(markup: str) -> list[str]:
    warnings = [
        f"Image {index} missing alt attribute for accessibility"
        for index, tag in enumerate(_IMG.findall(markup), start=1)
        if not _has_attribute(tag, "alt")
    ]
    labelled = set(_LABEL_FOR.findall(markup))
    for index, tag in enumerate(_INPUT.findall(markup), start=1):
        kind = (_attribute(tag, "type") or "text").lower()
        if kind not in TEXT_INPUT_TYPES:
            continue
        if _attribute(tag, "placeholder") or _attribute(tag, "aria-label"):
            continue
        if _attribute(tag, "id") in labelled:
            continue
        warnings.append(f"Form input {index} missing label or placeholder")
    return warnings


def _check_schemes(html: str) -> list[str]:
    lowered = html.lower()
    warnings = []
    if "javascript:" in lowered:
        warnings.append("Found javascript: URI which may be blocked by browsers")
    if "data:text/html" in lowered:
        warnings.append("Found data:text/html URI which may pose security risks")
    return warnings


def validate(html: str) -> list[str]:
    """Return advisory warnings about ``html``; an empty list means clean.

    Parameters
    ----------
    html : str
        A complete document, usually the optimizer's output.

    Returns
    -------
    list[str]
        Findings in a stable order: required elements, tag balance, size,
        accessibility, then disallowed URI schemes.
    """
    markup = _markup_only(html)
    return [
        *_check_required(html),
        *_check_balance(markup),
        *_check_size(html),
        *_check_accessibility(markup),
        *_check_schemes(html),
    ]


@dc.dataclass(frozen=True, slots=True)
class PerformanceReport:
    """Rough size breakdown of a compiled document."""

    size: int
    css_size: int
    script_size: int
    image_count: int
    estimated_load_seconds: int
    recommendations: tuple[str, ...]


def analyze_performance(html: str) -> PerformanceReport:
    """Estimate load cost of ``html`` over a slow mobile connection."""
    size = len(html.encode("utf-8"))
    css_size = sum(len(block) for block in _STYLE_BLOCK.findall(html))
    script_size = sum(len(block) for block in _SCRIPT_BLOCK.findall(html))
    image_count = len(_IMG.findall(html))
    estimated = round(size / 1024 * 0.5)
    recommendations = []
    if size > 100 * 1024:
        recommendations.append("Consider reducing HTML size; currently over 100KB")
    if css_size > 50 * 1024:
        recommendations.append("CSS size is large; consider removing unused styles")
    if script_size > 30 * 1024:
        recommendations.append("JavaScript size is large; consider trimming scripts")
    if image_count > 10:
        recommendations.append("Many images detected; consider fewer or smaller ones")
    if estimated < 2:
        recommendations.append("Good performance; page should load quickly")
    elif estimated < 5:
        recommendations.append("Moderate performance; consider minor optimizations")
    else:
        recommendations.append("Performance needs improvement")
    return PerformanceReport(
        size=size,
        css_size=css_size,
        script_size=script_size,
        image_count=image_count,
        estimated_load_seconds=estimated,
        recommendations=tuple(recommendations),
    )


__all__ = [
    "TEXT_INPUT_TYPES",
    "VOID_ELEMENTS",
    "PerformanceReport",
    "analyze_performance",
    "validate",
]
