from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from uvplan.catalog.fixtures import FixtureSpec, list_models, lookup


PRODUCTS_BASE_URL = "https://wildfirelighting.com/products"
STORE_BASE_URL = "https://store.wildfirelighting.com"
SAFETY_GUIDE_URL = "https://wildfirelighting.com/uv-safety/"
MAIN_URL = "https://wildfirelighting.com"
SUPPORT_URL = "https://wildfirelighting.com/contact/"

SERIES_LABELS: Dict[str, str] = {
    "VSP": "VSP — VioStorm UV LED",
    "EM": "EM — Effects Master",
    "UB": "UB — UltraBlack",
    "UR": "UR — UltraRay",
    "L": "L — SableLED / SableLux",
}

# prefix -> product page slug; order matters since "L" is the loosest prefix
_SERIES_SLUGS = (
    ("VSP", "viostorm-uv-led-lighting-series"),
    ("EM", "effects-master-series"),
    ("UB", "ultrablack-series"),
    ("UR", "ultraray-series"),
    ("L", "sablelux-sableled-lamps"),
)

_STORE_URLS: Dict[str, str] = {
    "VSP-120S": f"{STORE_BASE_URL}/lighting/viostorm-led-series/viostorm-vs-120s-120w-365nm-uv-led-spot/",
    "VSP-120WS": f"{STORE_BASE_URL}/lighting/viostorm-led-series/viostorm-vs-120ws-120w-365nm-uv-led-wide-spot/",
    "VSP-60F": f"{STORE_BASE_URL}/lighting/viostorm-led-series/viostorm-vs-60f-60w-365nm-uv-led-flood/",
    "VSP-60S": f"{STORE_BASE_URL}/lighting/viostorm-led-series/viostorm-vs-60s-60w-365nm-uv-led-spot/",
}

# Wall draw in watts (TDS). VSP values are whole-fixture consumption, L lamps are not listed.
_POWER_WATTS: Dict[str, float] = {
    "VSP-120F": 175, "VSP-120S": 175, "VSP-120WS": 175,
    "VSP-60F": 86, "VSP-60S": 86, "VSP-60WS": 86,
    "EM-44V": 300,
    "EM-44L": 60, "EM-42L": 30, "EM-22L": 18,
    "EM-43E": 108, "EM-42E": 88,
    "UB-44": 150, "UB-42": 80, "UB-41": 40, "UB-21": 20,
    "UR-46": 96, "UR-22": 44, "UR-12": 22,
}


@dataclass(frozen=True)
class DMXChannel:
    channel: int
    function: str
    range: str


@dataclass(frozen=True)
class RadiantPower:
    value: float
    unit: str


@dataclass(frozen=True)
class FixtureInfo:
    model: str
    spec: FixtureSpec
    category: str
    series: str
    control_type: str
    power_watts: Optional[float] = None
    radiant_power: Optional[RadiantPower] = None
    notes: Optional[str] = None
    dmx_channels: List[DMXChannel] = field(default_factory=list)
    manual_url: Optional[str] = None
    store_url: Optional[str] = None


def fixture_category(model: str) -> str:
    if model.startswith("VSP"):
        return "VSP — VioStorm UV LED (High Power)"
    if model.startswith("EM"):
        return "EM — Effects Master (Fluorescent/LED)"
    if model.startswith("UB"):
        return "UB — UltraBlack Fluorescent"
    if model.startswith("UR"):
        return "UR — UltraRay Compact Fluorescent"
    if model.startswith("L"):
        return "L — SableLED / SableLux Lamps"
    return "Other"


def fixture_series(model: str) -> str:
    if model.startswith("VSP"):
        return "VioStorm LED"
    if model.startswith("EM-44V"):
        return "Effects Master VHO"
    if model.startswith("EM-4") or model.startswith("EM-2"):
        return "Effects Master Energy/LED"
    if model.startswith("UB"):
        return "UltraBlack"
    if model.startswith("UR"):
        return "UltraRay"
    if model.startswith("L"):
        return "SableLED / SableLux Lamp"
    return "Wildfire Lighting"


def fixture_control_type(model: str) -> str:
    return "DMX / RDM" if model.startswith("VSP") else "On/Off (Mains)"


def fixture_dmx_channels(model: str) -> Optional[List[DMXChannel]]:
    if not model.startswith("VSP"):
        return None
    return [
        DMXChannel(1, "Dimming Coarse", "0-255 (0-100%)"),
        DMXChannel(2, "Dimming Fine", "0-255 (16-bit)"),
        DMXChannel(3, "Effects / Strobe", "0=off 1-10=strobe"),
    ]


def fixture_power_watts(model: str) -> Optional[float]:
    return _POWER_WATTS.get(model)


def fixture_radiant_power(model: str) -> Optional[RadiantPower]:
    """
    Total radiant UV output from the TDS sheets.

    VSP figures are whole-fixture radiant power in mW. EM LED figures are
    power density at 0.5 m and are not comparable to the VSP totals.
    """
    if model in ("VSP-120F", "VSP-120S", "VSP-120WS"):
        return RadiantPower(24480, "mW")
    if model in ("VSP-60F", "VSP-60S", "VSP-60WS"):
        return RadiantPower(12240, "mW")
    if model == "EM-44L":
        return RadiantPower(2400, "mW/m² @0.5m")
    if model == "EM-42L":
        return RadiantPower(1200, "mW/m² @0.5m")
    if model == "EM-22L":
        return RadiantPower(800, "mW/m² @0.5m")
    return None


def fixture_notes(model: str) -> Optional[str]:
    if model.startswith("VSP-120"):
        return (
            "Highest-output UV LED fixture. 175W consumption, 24,480mW radiant output. "
            "Ideal for long-throw applications (6-15m). Supports interchangeable silicone optics. RDM supported."
        )
    if model.startswith("VSP-60"):
        return (
            "Half the radiant output of VSP-120 (12,240mW) at 86W consumption. "
            "Identical optic options. Best for medium-throw (3-8m). Full DMX/RDM support."
        )
    if model == "EM-44V":
        return (
            "Highest-output fluorescent UV fixture. 300W, can daisy-chain up to 3 units per 20A circuit. "
            "Best for wash/ambient UV flooding."
        )
    if model.startswith("EM") and "L" in model:
        return (
            "Effects Master LED Series uses SableLED lamps. 42.5% more UV output than Energy Series. "
            "Flicker and RF interference free."
        )
    if model.startswith("EM") and "E" in model:
        return "Effects Master Energy Series. Electronic HO ballast, Power Factor > 98%. Universal 120-250VAC input."
    if model.startswith("UB"):
        return "Broad-area UV wash. Wide 120° beam ideal for haunted attractions, escape rooms, and blacklight theatre."
    if model.startswith("UR"):
        return "Compact fluorescent series. Low power, ideal for accent lighting and small spaces."
    if model.startswith("L"):
        return "Replacement lamps for Effects Master or UltraBlack housings. 365nm peak UV emission."
    return None


def _series_slug(model: str) -> Optional[str]:
    for prefix, slug in _SERIES_SLUGS:
        if model.startswith(prefix):
            return slug
    return None


def fixture_manual_url(model: str) -> Optional[str]:
    slug = _series_slug(model)
    return f"{PRODUCTS_BASE_URL}/{slug}/" if slug else None


def fixture_spec_page_url(model: str) -> Optional[str]:
    slug = _series_slug(model)
    return f"{PRODUCTS_BASE_URL}/{slug}/#specifications" if slug else None


def fixture_comparison_url(model: str) -> Optional[str]:
    slug = _series_slug(model)
    if slug is None or model.startswith("L"):
        return None
    return f"{PRODUCTS_BASE_URL}/{slug}/#comparison"


def fixture_store_url(model: str) -> Optional[str]:
    if model in _STORE_URLS:
        return _STORE_URLS[model]
    if model.startswith("VSP"):
        return f"{STORE_BASE_URL}/lighting/viostorm-led-series/"
    if model.startswith("EM") or model.startswith("UB") or model.startswith("UR"):
        return f"{STORE_BASE_URL}/lighting/"
    if model.startswith("L"):
        return f"{STORE_BASE_URL}/sableled-led-blb-lamps/"
    return None


def fixture_from_qr(payload: str) -> Optional[str]:
    """
    Resolve a scanned QR payload to a catalog model id.

    Accepts either a JSON object carrying a ``fixture`` key or a bare model id.
    Returns None when the payload names no known fixture.
    """
    known = set(list_models())
    try:
        data = json.loads(payload)
    except (TypeError, ValueError):
        return payload if payload in known else None
    if isinstance(data, dict):
        model = data.get("fixture")
        return model if isinstance(model, str) and model in known else None
    return payload if payload in known else None


def describe_fixture(model: str) -> Optional[FixtureInfo]:
    spec = lookup(model)
    if spec is None:
        return None
    return FixtureInfo(
        model=model,
        spec=spec,
        category=fixture_category(model),
        series=fixture_series(model),
        control_type=fixture_control_type(model),
        power_watts=fixture_power_watts(model),
        radiant_power=fixture_radiant_power(model),
        notes=fixture_notes(model),
        dmx_channels=fixture_dmx_channels(model) or [],
        manual_url=fixture_manual_url(model),
        store_url=fixture_store_url(model),
    )
