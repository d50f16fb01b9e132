"""Shared fixtures for the landing page compiler tests.

Every fixture that builds a compiler injects :data:`FIXED_NOW` as the clock so
compiled documents are reproducible byte for byte.
"""

from __future__ import annotations

import copy
import datetime as dt
import typing as typ

import pytest

from landing_pages.compiler import CompilerAssets, PageCompiler
from landing_pages.model import PageModel, parse_page_model
from landing_pages.settings import VendorSettings

FIXED_NOW = dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.UTC)
FIXED_STAMP = 1_714_564_800_000

SAMPLE_PAYLOAD: dict[str, typ.Any] = {
    "id": "spring-sale",
    "title": "Spring Sale",
    "globalStyles": {
        "primaryColor": "#ff5722",
        "secondaryColor": "#009688",
        "fontFamily": "classic",
    },
    "metadata": {
        "description": "Deals that bloom.",
        "favicon": "https://cdn.example.com/favicon.ico",
    },
    "sections": [
        {
            "id": "hero-1",
            "type": "hero",
            "order": 0,
            "data": {
                "headline": "Spring Sale",
                "subheadline": "Up to 50% off",
                "buttonText": "Shop now",
                "buttonAction": "scroll",
            },
        },
        {
            "id": "content-1",
            "type": "content",
            "order": 1,
            "data": {
                "title": "Why us",
                "content": "Fresh stock.\n\nFast shipping.",
                "imageUrl": "https://cdn.example.com/why.jpg",
                "imagePosition": "left",
            },
        },
        {
            "id": "cta-1",
            "type": "cta",
            "order": 2,
            "data": {
                "title": "Get in touch",
                "description": "We reply within a day.",
                "formEnabled": True,
                "formFields": {"name": True, "email": True, "phone": False},
                "buttonText": "Send",
                "recipientEmail": "owner@example.com",
            },
        },
    ],
}


def fixed_clock() -> dt.datetime:
    """Return the frozen build time used throughout the suite."""
    return FIXED_NOW


@pytest.fixture(scope="session")
def assets() -> CompilerAssets:
    """Load the packaged templates and stylesheets once per session."""
    return CompilerAssets.load()


@pytest.fixture
def compiler(assets: CompilerAssets) -> PageCompiler:
    """Return a compiler with no vendor ids and a fixed clock."""
    return PageCompiler(assets, settings=VendorSettings(), clock=fixed_clock)


@pytest.fixture
def sample_payload() -> dict[str, typ.Any]:
    """Return a fresh copy of the editor payload for the sample page."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def sample_page(sample_payload: dict[str, typ.Any]) -> PageModel:
    """Return the sample page as a parsed model."""
    return parse_page_model(sample_payload)


@pytest.fixture
def fixed_stamp() -> int:
    """Return the build stamp, in epoch milliseconds, of :data:`FIXED_NOW`."""
    return FIXED_STAMP
