"""Behaviour tests for compiling a page model into a single document.

The scenarios in ``page_compilation.feature`` drive :class:`PageCompiler`
directly and through the ``landing compile`` command, checking section order,
form backend wiring, the animation toggle, and the metadata sidecar.

Usage
-----
Run ``pytest tests/bdd/test_page_compilation.py -v`` after installing the test
extra (``pip install -e .[test]``). Steps share data through the
``scenario_state`` fixture; no network access is required.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from landing_pages import cli
from landing_pages.compiler import PageCompiler, validate
from landing_pages.compiler.checksum import checksum
from landing_pages.model import FormService, GeneratorOptions, parse_page_model

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "page_compilation.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    html = typ.cast("str", scenario_state["html"])
    return BeautifulSoup(html, "html.parser")


@given("the sample page model")
def given_sample_model(
    sample_payload: dict[str, typ.Any], scenario_state: dict[str, object]
) -> None:
    """Store the editor payload of the sample page."""
    scenario_state["payload"] = sample_payload


@given(parsers.parse("the sections are reordered to {orders}"))
def given_reordered(orders: str, scenario_state: dict[str, object]) -> None:
    """Assign new ``order`` values to the sections in input order."""
    payload = typ.cast("dict[str, typ.Any]", scenario_state["payload"])
    values = [int(value) for value in orders.split(",")]
    for section, order in zip(payload["sections"], values, strict=True):
        section["order"] = order


@given("the sample page model saved as JSON")
def given_saved_model(
    sample_payload: dict[str, typ.Any],
    tmp_path: Path,
    scenario_state: dict[str, object],
) -> None:
    """Write the sample payload where the CLI can read it."""
    page_path = tmp_path / "page.json"
    page_path.write_text(json.dumps(sample_payload), encoding="utf-8")
    scenario_state["page_path"] = page_path


def _compile(
    compiler: PageCompiler,
    scenario_state: dict[str, object],
    options: GeneratorOptions,
) -> None:
    payload = typ.cast("dict[str, typ.Any]", scenario_state["payload"])
    output = compiler.compile(parse_page_model(payload), options)
    scenario_state["html"] = output.html
    scenario_state["warnings"] = output.warnings


@when("I compile the page with default options")
def when_compile_default(
    compiler: PageCompiler, scenario_state: dict[str, object]
) -> None:
    """Compile the stored payload with default options."""
    _compile(compiler, scenario_state, GeneratorOptions())


@when(parsers.parse('I compile the page with the "{service}" form service'))
def when_compile_with_service(
    service: str, compiler: PageCompiler, scenario_state: dict[str, object]
) -> None:
    """Compile the stored payload against the named form backend."""
    options = GeneratorOptions(form_service=FormService.parse(service))
    _compile(compiler, scenario_state, options)


@when("I compile the page without animations")
def when_compile_without_animations(
    compiler: PageCompiler, scenario_state: dict[str, object]
) -> None:
    """Compile the stored payload with animations disabled."""
    _compile(compiler, scenario_state, GeneratorOptions(include_animations=False))


@when("I run the compile command")
def when_run_compile(
    tmp_path: Path,
    scenario_state: dict[str, object],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Invoke ``landing compile`` against the saved payload."""
    monkeypatch.delenv("LANDING_GA_ID", raising=False)
    monkeypatch.delenv("LANDING_ADSENSE_CLIENT_ID", raising=False)
    output = tmp_path / "site" / "index.html"
    cli.compile_page(
        page=typ.cast("Path", scenario_state["page_path"]),
        output=output,
        config=tmp_path / "missing.toml",
    )
    scenario_state["output"] = output


@then(parsers.parse("the section kinds appear as {kinds}"))
def then_section_kinds(kinds: str, scenario_state: dict[str, object]) -> None:
    """Verify the rendered section kinds, in document order."""
    expected = [kind.strip() for kind in kinds.split(",")]
    rendered = [
        tag["data-section-kind"]
        for tag in _soup(scenario_state).select("section[data-section-kind]")
    ]
    assert rendered == expected


@then("the document has no validation warnings")
def then_no_warnings(scenario_state: dict[str, object]) -> None:
    """Verify the compiler reported no warnings."""
    assert scenario_state["warnings"] == ()


@then(parsers.parse('the form is marked for the "{service}" handler'))
def then_form_handler(service: str, scenario_state: dict[str, object]) -> None:
    """Verify the form advertises the chosen backend."""
    form = _soup(scenario_state).select_one("form")
    assert form is not None
    assert form["data-form-handler"] == service


@then("the submit script decorates the form for the hosting platform")
def then_platform_script(scenario_state: dict[str, object]) -> None:
    """Verify the platform-native script adds its attributes at runtime."""
    html = typ.cast("str", scenario_state["html"])
    assert "data-netlify-honeypot" in html
    assert "bot-field" in html
    form = _soup(scenario_state).select_one("form")
    assert form is not None
    assert all(field["type"] != "hidden" for field in form.select("input"))


@then("no keyframes are embedded")
def then_no_keyframes(scenario_state: dict[str, object]) -> None:
    """Verify the stylesheet carries no animation keyframes."""
    assert "@keyframes" not in typ.cast("str", scenario_state["html"])


@then("no section carries an animation class")
def then_no_animation_class(scenario_state: dict[str, object]) -> None:
    """Verify the section containers are not animated."""
    sections = _soup(scenario_state).select("section")
    assert sections
    assert all("animate-fade-in" not in tag["class"] for tag in sections)


@then("the output file is a complete document")
def then_output_document(scenario_state: dict[str, object]) -> None:
    """Verify the written document passes validation."""
    output = typ.cast("Path", scenario_state["output"])
    html = output.read_text(encoding="utf-8")
    assert html.startswith("<!DOCTYPE html>")
    assert validate(html) == []


@then("the sidecar records the page id and checksum")
def then_sidecar(scenario_state: dict[str, object]) -> None:
    """Verify the metadata sidecar written beside the document."""
    output = typ.cast("Path", scenario_state["output"])
    meta_path = cli.meta_path_for(output, "spring-sale")
    meta = msgspec_json.decode(meta_path.read_bytes(), type=cli.PageMeta)
    assert meta.page_id == "spring-sale"
    assert meta.checksum == checksum(output.read_text(encoding="utf-8"))
