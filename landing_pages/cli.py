"""Cyclopts CLI entrypoint for compiling landing pages.

The ``landing`` console script defined here compiles a page model exported by
the editor into one self-contained HTML document, and re-validates documents
that were compiled earlier. Typical usage is ``landing compile`` in a build
step, followed by uploading the written file with whatever hosting tool the
site uses.

Examples
--------
Compile a page with the default options:

>>> from landing_pages.cli import main
>>> main(["compile", "--page", "page.yaml", "--output", "index.html"])  # doctest: +SKIP

Compile for a platform that captures form posts itself:

>>> from landing_pages.cli import app
>>> app(
...     [
...         "compile",
...         "--page",
...         "page.yaml",
...         "--output",
...         "dist/index.html",
...         "--form-service",
...         "platform-native-forms",
...     ]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
import msgspec
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from ._constants import PAGE_META_TEMPLATE
from .compiler import CompilerAssets, PageCompiler, analyze_performance, validate
from .model import FormService, GeneratedOutput, GeneratorOptions, load_page_model
from .settings import DEFAULT_CONFIG_PATH, load_vendor_settings

if typ.TYPE_CHECKING:
    from collections.abc import Sequence

app = App(name="landing", config=cyclopts.config.Env("LANDING_", command=False))  # type: ignore[unknown-argument]


class PageMeta(msgspec.Struct, kw_only=True):
    """Sidecar record written next to each compiled document."""

    page_id: str
    output: str
    size: int
    warnings: list[str]
    generated_at: str
    version: str
    checksum: str


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def meta_path_for(output: Path, page_id: str) -> Path:
    """Return where the metadata sidecar for ``output`` is written."""
    return output.parent / PAGE_META_TEMPLATE.format(key=page_id)


def write_output(output: Path, page_id: str, result: GeneratedOutput) -> list[Path]:
    """Write the document and its metadata sidecar; return both paths."""
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.html, encoding="utf-8")
    meta = PageMeta(
        page_id=page_id,
        output=output.name,
        size=result.size,
        warnings=list(result.warnings),
        generated_at=result.metadata.generated_at,
        version=result.metadata.version,
        checksum=result.metadata.checksum,
    )
    meta_path = meta_path_for(output, page_id)
    meta_path.write_bytes(msgspec_json.format(msgspec_json.encode(meta)) + b"\n")
    return [output, meta_path]


@app.command(name="compile", help="Compile a page model into a single HTML file.")
def compile_page(
    *,
    page: typ.Annotated[Path, Parameter(help="Page model file (YAML or JSON)")],
    output: typ.Annotated[Path, Parameter(help="Where to write the HTML document")],
    form_service: typ.Annotated[
        str, Parameter(help="Form backend for call-to-action forms")
    ] = str(FormService.CUSTOM_ENDPOINT),
    minify: typ.Annotated[bool, Parameter(help="Optimize the document")] = True,
    analytics: typ.Annotated[
        bool, Parameter(help="Embed the analytics snippet when configured")
    ] = False,
    adsense: typ.Annotated[
        bool, Parameter(help="Embed the ad snippets when configured")
    ] = False,
    animations: typ.Annotated[
        bool, Parameter(help="Emit entrance animations")
    ] = True,
    config: typ.Annotated[
        Path,
        Parameter(help="Vendor settings (TOML)", env_var="LANDING_CONFIG_FILE"),
    ] = DEFAULT_CONFIG_PATH,
    verbose: typ.Annotated[bool, Parameter(help="Log every stage")] = False,
) -> None:
    """Compile ``page`` and write the document plus its metadata sidecar.

    Parameters
    ----------
    page : Path
        Page model exported by the editor.
    output : Path
        Destination of the HTML document. The metadata sidecar
        ``.landing-<page id>-meta.json`` is written beside it.
    form_service : str, optional
        ``hosted-form-service``, ``platform-native-forms`` or
        ``custom-endpoint`` (legacy editor names are accepted).
    minify : bool, optional
        Run the optimizer (``--no-minify`` keeps the readable output).
    analytics : bool, optional
        Emit the analytics snippet if an analytics id is configured.
    adsense : bool, optional
        Emit the ad snippets if an ad client id is configured.
    animations : bool, optional
        Emit keyframe animations.
    config : Path, optional
        TOML file holding the ``[vendors]`` table.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    ValueError
        If ``form_service`` names no known backend or the settings file is
        malformed.
    GenerationError
        If compilation fails.
    """
    _configure_logging(verbose=verbose)
    model = load_page_model(page)
    options = GeneratorOptions(
        minify=minify,
        include_analytics=analytics,
        include_adsense=adsense,
        form_service=FormService.parse(form_service),
        include_animations=animations,
    )
    compiler = PageCompiler(
        CompilerAssets.load(), settings=load_vendor_settings(config_path=config)
    )
    result = compiler.compile(model, options)
    written = write_output(output, model.id, result)
    for path in written:
        print(f"wrote {_format_path(path)}")
    for warning in result.warnings:
        print(f"warning: {warning}")


@app.command(name="validate", help="Report structural warnings for an HTML file.")
def validate_file(
    path: Path,
    *,
    performance: typ.Annotated[
        bool, Parameter(help="Also print size and load-time recommendations")
    ] = False,
) -> None:
    """Print validator warnings for ``path``.

    Parameters
    ----------
    path : Path
        A compiled document.
    performance : bool, optional
        Append the performance report to the output.
    """
    html = path.read_text(encoding="utf-8")
    warnings = validate(html)
    if warnings:
        for warning in warnings:
            print(f"warning: {warning}")
    else:
        print("no warnings")
    if performance:
        report = analyze_performance(html)
        print(
            f"size: {report.size} bytes, css: {report.css_size}, "
            f"scripts: {report.script_size}, images: {report.image_count}, "
            f"estimated load: ~{report.estimated_load_seconds}s"
        )
        for recommendation in report.recommendations:
            print(f"- {recommendation}")


def main(argv: Sequence[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the ``landing`` command.

    Parameters
    ----------
    argv : Sequence[str], optional
        Arguments to parse instead of ``sys.argv``.

    Examples
    --------
    >>> main(["validate", "index.html"])  # doctest: +SKIP
    """
    app(argv)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
