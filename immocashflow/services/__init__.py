"""Adapters for the collaborators around the engine."""

from .importer import ListingImport, fetch_listing, parse_listing_html
from .location import InMemoryLocationLookup, LocationLookup, LocationRecord
from .market import MarketEstimate, apply_estimates, estimate_market_data

__all__ = [
    "ListingImport",
    "fetch_listing",
    "parse_listing_html",
    "LocationRecord",
    "LocationLookup",
    "InMemoryLocationLookup",
    "MarketEstimate",
    "estimate_market_data",
    "apply_estimates",
]
