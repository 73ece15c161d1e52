"""Request option shapes that turn search criteria into query parameters.

Every shape exposes ``get_parameters()`` which validates its own inputs and returns a
flat ``Dict[str, str]``. Shapes are combined with :func:`merge_parameters`; later
contributors win on key collisions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence, Union

from .errors import MissingRequiredError

logger = logging.getLogger(__name__)

Parameters = Dict[str, str]


def format_coordinate(value: float) -> str:
    """Render a coordinate as the shortest round-trip decimal, never in exponent form."""
    rendered = format(Decimal(repr(float(value))), "f")
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered


def _coordinates_complete(latitude: Optional[float], longitude: Optional[float]) -> bool:
    return latitude is not None and longitude is not None


def _coordinate_parameters(latitude: float, longitude: float) -> Parameters:
    if not -90.0 <= latitude <= 90.0:
        logger.debug("Latitude %s is outside [-90, 90]; forwarding anyway", latitude)
    if not -180.0 <= longitude <= 180.0:
        logger.debug("Longitude %s is outside [-180, 180]; forwarding anyway", longitude)
    return {
        "latitude": format_coordinate(latitude),
        "longitude": format_coordinate(longitude),
    }


@dataclass
class CoordinateOptions:
    """A geo-point to search near. ``None`` means unset, ``0.0`` is a real coordinate."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        return _coordinates_complete(self.latitude, self.longitude)

    def get_parameters(self) -> Parameters:
        if not self.is_complete:
            raise MissingRequiredError("latitude and longitude are required fields for a coordinate based search")
        return _coordinate_parameters(self.latitude, self.longitude)


@dataclass
class LocationOptions:
    """Free-text location, optionally disambiguated by a coordinate hint.

    ``location`` is the combination of "address, neighborhood, city, state or zip,
    optional country". The hint is sent alongside the text so the geocoder can pick
    between ambiguous matches.
    """

    location: str = ""
    coordinates: Optional[CoordinateOptions] = None

    def get_parameters(self) -> Parameters:
        location_provided = bool(self.location)
        coordinates_provided = self.coordinates is not None and self.coordinates.is_complete

        if not location_provided and not coordinates_provided:
            raise MissingRequiredError(
                "To perform a location based search, provide either a location or complete coordinates."
            )

        params: Parameters = {}
        if location_provided:
            params["location"] = self.location
        if coordinates_provided:
            params.update(self.coordinates.get_parameters())
        return params


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(item) for item in value)
    return str(value)


def merge_parameters(*contributors: Any) -> Parameters:
    """Union the parameters of each contributor, later ones overriding earlier keys.

    A contributor is anything with ``get_parameters()`` or a plain mapping. ``None``
    entries are skipped. The first validation failure propagates unchanged.
    """
    merged: Parameters = {}
    for contributor in contributors:
        if contributor is None:
            continue
        if hasattr(contributor, "get_parameters"):
            merged.update(contributor.get_parameters())
        else:
            merged.update({str(key): _render_value(val) for key, val in contributor.items()})
    return merged


@dataclass
class SearchOptions:
    """Top-level options for a full search.

    A location (``location_options``) or a point (``coordinate_options``) is required.
    The remaining filters are forwarded to the API as-is and take precedence over
    the location keys; ``extra`` carries parameters without a dedicated field.
    """

    location_options: Optional[LocationOptions] = None
    coordinate_options: Optional[CoordinateOptions] = None
    term: Optional[str] = None
    categories: Optional[Union[str, Sequence[str]]] = None
    radius: Optional[int] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    sort_by: Optional[str] = None
    price: Optional[Union[str, Sequence[int]]] = None
    open_now: Optional[bool] = None
    open_at: Optional[int] = None
    locale: Optional[str] = None
    attributes: Optional[Union[str, Sequence[str]]] = None
    extra: Dict[str, str] = field(default_factory=dict)

    def filters(self) -> Dict[str, Any]:
        values = {
            "term": self.term,
            "categories": self.categories,
            "radius": self.radius,
            "limit": self.limit,
            "offset": self.offset,
            "sort_by": self.sort_by,
            "price": self.price,
            "open_now": self.open_now,
            "open_at": self.open_at,
            "locale": self.locale,
            "attributes": self.attributes,
        }
        return {key: value for key, value in values.items() if value is not None}

    def get_parameters(self) -> Parameters:
        if self.location_options is None and self.coordinate_options is None:
            raise MissingRequiredError("Search options need location_options or coordinate_options.")
        return merge_parameters(self.location_options, self.coordinate_options, self.filters(), self.extra)
