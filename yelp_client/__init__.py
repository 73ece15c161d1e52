"""Lightweight wrapper around the Yelp Fusion REST API (search and business lookups)."""

from .client import Client, build_url
from .errors import (
    BusinessNotFoundError,
    DecodeError,
    MissingRequiredError,
    RemoteError,
    TransportError,
    YelpError,
)
from .models import (
    Business,
    BusinessDetail,
    Category,
    Coordinates,
    Deal,
    DealOption,
    GiftCertificate,
    GiftCertificateOption,
    Hours,
    Location,
    Open,
    Region,
    Review,
    SearchResult,
    User,
)
from .options import CoordinateOptions, LocationOptions, SearchOptions, merge_parameters

__all__ = [
    "Business",
    "BusinessDetail",
    "BusinessNotFoundError",
    "Category",
    "Client",
    "CoordinateOptions",
    "Coordinates",
    "Deal",
    "DealOption",
    "DecodeError",
    "GiftCertificate",
    "GiftCertificateOption",
    "Hours",
    "Location",
    "LocationOptions",
    "MissingRequiredError",
    "Open",
    "Region",
    "RemoteError",
    "Review",
    "SearchOptions",
    "SearchResult",
    "TransportError",
    "User",
    "YelpError",
    "build_url",
    "merge_parameters",
]
