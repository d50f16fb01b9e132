"""Compile landing page models into self-contained HTML documents.

The subpackage holds every pipeline stage: section renderers, the stylesheet
and form-handler generators, vendor snippets, the page assembler, the
optimizer, and the validator. :class:`PageCompiler` runs them in order over
assets loaded once by :class:`CompilerAssets`.
"""

from .assets import CompilerAssets
from .optimizer import optimize
from .page_compiler import GenerationError, PageCompiler, utc_now
from .validator import analyze_performance, validate

__all__ = [
    "CompilerAssets",
    "GenerationError",
    "PageCompiler",
    "analyze_performance",
    "optimize",
    "utc_now",
    "validate",
]
