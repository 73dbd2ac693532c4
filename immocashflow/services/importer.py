"""Listing URL import.

Best-effort extraction of price, surface and location from a property
listing page. Listing sites often block automated requests, so a failed
fetch degrades to a deterministic demo record derived from the URL.
"""

from __future__ import annotations

import hashlib
import re
from typing import Any
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup
from pydantic import BaseModel

from immocashflow.core.exceptions import ListingImportError
from immocashflow.core.logging import get_logger
from immocashflow.domain.models.investment import PropertyType

log = get_logger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/124.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "fr-FR,fr;q=0.9",
}

WORKS_SHARE_WHEN_MENTIONED = 0.10
FURNITURE_WHEN_FURNISHED = 3000.0
DEFAULT_PRICE_FOR_WORKS = 100000.0

_JSON_PRICE_RE = re.compile(r"[\"']price[\"']\s*:\s*(\d+)", re.IGNORECASE)
_TEXT_PRICE_RE = re.compile(r"(\d+[\d\s]*)\s*€")
_SURFACE_RE = re.compile(r"(\d+[\d,]*)\s*(m²|m2)", re.IGNORECASE)
_URL_CITY_RE = (
    re.compile(r"/([a-z-]+)-(\d{5})/", re.IGNORECASE),
    re.compile(r"/([a-z-]+)-(\d{2})/", re.IGNORECASE),
)
_TEXT_ZIP_RE = re.compile(r"(\d{5})\s+[a-zA-Z]")

DEMO_CITIES = (
    ("paris", "paris", "75001"),
    ("lyon", "lyon", "69001"),
)
DEMO_DEFAULT_CITY = ("bordeaux", "33000")


class ListingImport(BaseModel):
    """Partial property record extracted from a listing."""

    price: float | None = None
    surface: float | None = None
    works: float | None = None
    furniture: float | None = None
    monthly_rent: float | None = None
    loan_amount: float | None = None
    property_type: PropertyType | None = None
    city: str | None = None
    zip_code: str | None = None
    is_demo: bool = False

    def to_updates(self) -> dict[str, Any]:
        """Fields to merge into ``InvestmentData``."""
        fields = ("price", "surface", "works", "furniture", "monthly_rent", "loan_amount", "property_type")
        return {k: getattr(self, k) for k in fields if getattr(self, k) is not None}


def _parse_price(html: str) -> float | None:
    match = _JSON_PRICE_RE.search(html) or _TEXT_PRICE_RE.search(html)
    if not match:
        return None
    digits = re.sub(r"\s", "", match.group(1))
    return float(digits) if digits else None


def _parse_surface(text: str) -> float | None:
    match = _SURFACE_RE.search(text)
    if not match:
        return None
    raw = match.group(1).replace(",", ".")
    try:
        return float(raw)
    except ValueError:
        return None


def _parse_location(url: str, text: str) -> tuple[str | None, str | None]:
    for pattern in _URL_CITY_RE:
        match = pattern.search(url)
        if match:
            city = match.group(1).replace("-", " ")
            zip_code = match.group(2)
            # Department-only slugs: 75 -> 75000
            if len(zip_code) == 2:
                zip_code = f"{zip_code}000"
            return city, zip_code

    match = _TEXT_ZIP_RE.search(text)
    return None, (match.group(1) if match else None)


def parse_listing_html(url: str, html: str) -> ListingImport:
    """Extract what can be found in a listing page."""
    if not html:
        return ListingImport()

    text = BeautifulSoup(html, "html.parser").get_text(" ")
    lower = text.lower()

    price = _parse_price(html)
    surface = _parse_surface(text)

    works = None
    if "travaux" in lower or "rénovation" in lower:
        works = (price or DEFAULT_PRICE_FOR_WORKS) * WORKS_SHARE_WHEN_MENTIONED

    furniture = FURNITURE_WHEN_FURNISHED if "meublé" in lower else None
    city, zip_code = _parse_location(url, text)

    return ListingImport(
        price=price,
        surface=surface,
        works=works,
        furniture=furniture,
        city=city,
        zip_code=zip_code,
    )


def demo_listing(url: str, partial: ListingImport | None = None) -> ListingImport:
    """Plausible listing derived from the URL, stable across calls."""
    seed = int(hashlib.sha256(url.encode("utf-8")).hexdigest(), 16)
    price = 200000.0 + seed % 50000
    surface = 40.0 + (seed // 50000) % 20

    works = 0.0
    property_type = None
    if "leboncoin" in url:
        works = 5000.0
        property_type = PropertyType.OLD

    city = partial.city if partial else None
    zip_code = partial.zip_code if partial else None
    if not city:
        lowered = url.lower()
        for keyword, name, code in DEMO_CITIES:
            if keyword in lowered:
                city, zip_code = name, code
                break
        else:
            city, zip_code = DEMO_DEFAULT_CITY

    return ListingImport(
        price=price,
        surface=surface,
        works=works,
        monthly_rent=round(price * 0.05 / 12),
        property_type=property_type,
        city=city,
        zip_code=zip_code,
        is_demo=True,
    )


def fetch_listing(
    url: str,
    session: requests.Session | None = None,
    timeout: int = 10,
) -> ListingImport:
    """Fetch and parse a listing URL.

    Raises:
        ListingImportError: if ``url`` is not an http(s) URL.
    """
    parsed = urlparse(url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ListingImportError(f"Not a listing URL: {url!r}")

    html = ""
    http = session or requests
    try:
        resp = http.get(url, headers=DEFAULT_HEADERS, timeout=timeout)
        resp.raise_for_status()
        html = resp.text
    except requests.RequestException as e:
        log.warning("listing_fetch_failed", url=url, error=str(e))

    listing = parse_listing_html(url, html)
    if listing.price is None:
        log.info("listing_demo_fallback", url=url)
        listing = demo_listing(url, listing)

    if listing.loan_amount is None:
        listing = listing.model_copy(update={"loan_amount": listing.price})

    return listing
