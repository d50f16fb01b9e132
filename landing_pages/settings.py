"""Vendor identifiers consumed by the analytics and ad snippets.

Settings are resolved the same way for the CLI and for library callers:

* Explicit arguments win.
* ``LANDING_GA_ID`` / ``LANDING_ADSENSE_CLIENT_ID`` environment variables
  come next.
* The ``[vendors]`` table of ``~/.config/landing-pages/config.toml`` (or the
  file named by ``LANDING_CONFIG_FILE``) fills whatever is still missing.

A missing settings file simply yields empty identifiers; the compiler then
leaves the corresponding insertion points empty.
"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ
from pathlib import Path

import tomlkit

DEFAULT_CONFIG_PATH = Path(
    os.getenv(
        "LANDING_CONFIG_FILE",
        Path.home() / ".config" / "landing-pages" / "config.toml",
    )
)


@dc.dataclass(frozen=True, slots=True)
class VendorSettings:
    """Third-party identifiers embedded into compiled pages."""

    analytics_id: str | None = None
    adsense_client_id: str | None = None

    @property
    def adsense_publisher_id(self) -> str | None:
        """Return the publisher id, i.e. the client id without ``ca-``."""
        if not self.adsense_client_id:
            return None
        return self.adsense_client_id.removeprefix("ca-")


def _read_vendor_table(path: Path) -> dict[str, typ.Any]:
    try:
        doc = tomlkit.parse(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except tomlkit.exceptions.ParseError as exc:
        msg = f"Unable to parse settings TOML at {path}"
        raise ValueError(msg) from exc
    table = doc.get("vendors")
    return {k: v for k, v in table.items()} if table else {}


def _clean(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def load_vendor_settings(
    *,
    config_path: Path | None = None,
    analytics_id: str | None = None,
    adsense_client_id: str | None = None,
) -> VendorSettings:
    """Merge explicit values, environment variables, and ``config.toml``.

    Parameters
    ----------
    config_path : Path, optional
        Settings file to read; defaults to :data:`DEFAULT_CONFIG_PATH`.
    analytics_id : str, optional
        Analytics measurement id overriding every other source.
    adsense_client_id : str, optional
        AdSense client id (``ca-pub-…``) overriding every other source.

    Returns
    -------
    VendorSettings
        The resolved identifiers; unset ones are ``None``.

    Raises
    ------
    ValueError
        If the settings file exists but is not valid TOML.
    """
    stored = _read_vendor_table(config_path or DEFAULT_CONFIG_PATH)
    return VendorSettings(
        analytics_id=_clean(
            analytics_id
            or os.getenv("LANDING_GA_ID")
            or stored.get("analytics_id")
        ),
        adsense_client_id=_clean(
            adsense_client_id
            or os.getenv("LANDING_ADSENSE_CLIENT_ID")
            or stored.get("adsense_client_id")
        ),
    )


__all__ = ["DEFAULT_CONFIG_PATH", "VendorSettings", "load_vendor_settings"]
