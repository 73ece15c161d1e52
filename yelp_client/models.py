"""Typed records decoded from Yelp Fusion API responses.

Decoding is tolerant: unknown keys are ignored, missing keys keep the field's zero
value and a handful of keys the API has shipped with odd casing are accepted too.
A nested value of the wrong container type raises ``TypeError`` and an unparsable
scalar raises ``ValueError``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


def _pick(payload: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first key present, or ``None``."""
    for key in keys:
        value = payload.get(key, _MISSING)
        if value is not _MISSING:
            return value
    return None


def _as_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be a JSON object, got {type(value).__name__}")
    return value


def _as_list(value: Any, name: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{name} must be a JSON array, got {type(value).__name__}")
    return value


def _str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return str(value)


def _float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    if value is None:
        return default
    if isinstance(value, (dict, list)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


def _int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    if value is None:
        return default
    if isinstance(value, (dict, list)):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return int(value)


def _bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (dict, list)):
        raise TypeError(f"expected a boolean, got {type(value).__name__}")
    if isinstance(value, str):
        # Some hour fields were historically sent as strings.
        lowered = value.strip().lower()
        if lowered in {"true", "1", "yes"}:
            return True
        if lowered in {"false", "0", "no", ""}:
            return False
        raise ValueError(f"cannot interpret {value!r} as a boolean")
    return bool(value)


def _str_list(value: Any, name: str) -> List[str]:
    return [_str(item) for item in _as_list(value, name)]


def _records(value: Any, name: str, factory: Callable[[Mapping[str, Any]], T]) -> List[T]:
    return [factory(_as_mapping(item, name)) for item in _as_list(value, name)]


@dataclass(slots=True)
class Coordinates:
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Coordinates":
        payload = _as_mapping(payload, "coordinates")
        return cls(latitude=_float(payload.get("latitude")), longitude=_float(payload.get("longitude")))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Region:
    """Suggested map bounds for a search result."""

    center: Coordinates = field(default_factory=Coordinates)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Region":
        payload = _as_mapping(payload, "region")
        return cls(center=Coordinates.from_dict(payload.get("center")))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Category:
    """Category pair; ``alias`` is what the ``categories`` search filter expects."""

    alias: str = ""
    title: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Category":
        payload = _as_mapping(payload, "category")
        return cls(alias=_str(_pick(payload, "alias", "Alias")), title=_str(_pick(payload, "title", "Title")))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Location:
    """Postal location of a business.

    ``state`` is an ISO 3166-2 subdivision code and ``country`` an ISO 3166-1 alpha-2
    code. The API has been seen sending the country under ``county``.
    """

    address1: str = ""
    address2: str = ""
    address3: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    zip_code: str = ""
    cross_streets: str = ""
    display_address: List[str] = field(default_factory=list)
    neighborhoods: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Location":
        payload = _as_mapping(payload, "location")
        return cls(
            address1=_str(payload.get("address1")),
            address2=_str(payload.get("address2")),
            address3=_str(payload.get("address3")),
            city=_str(payload.get("city")),
            state=_str(payload.get("state")),
            country=_str(_pick(payload, "country", "county")),
            zip_code=_str(payload.get("zip_code")),
            cross_streets=_str(payload.get("cross_streets")),
            display_address=_str_list(payload.get("display_address"), "display_address"),
            neighborhoods=_str_list(payload.get("neighborhoods"), "neighborhoods"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class User:
    id: str = ""
    image_url: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "User":
        payload = _as_mapping(payload, "user")
        return cls(
            id=_str(payload.get("id")),
            image_url=_str(_pick(payload, "image_url", "image_URL")),
            name=_str(payload.get("name")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Review:
    """A user review.

    The three rating images are 84x17, 50x10 and 166x30 pixels. ``time_created`` is a
    Unix timestamp in seconds.
    """

    id: str = ""
    rating: float = 0.0
    rating_image_url: str = ""
    rating_image_small_url: str = ""
    rating_image_large_url: str = ""
    excerpt: str = ""
    time_created: float = 0.0
    user: User = field(default_factory=User)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Review":
        payload = _as_mapping(payload, "review")
        return cls(
            id=_str(payload.get("id")),
            rating=_float(payload.get("rating")),
            rating_image_url=_str(payload.get("rating_image_url")),
            rating_image_small_url=_str(payload.get("rating_image_small_url")),
            rating_image_large_url=_str(_pick(payload, "rating_image_large_url", "Rating_image_large_url")),
            excerpt=_str(payload.get("excerpt")),
            time_created=_float(_pick(payload, "time_created", "Time_created")),
            user=User.from_dict(payload.get("user")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class DealOption:
    """Purchasable option of a deal. Raw prices are in cents."""

    title: str = ""
    purchase_url: str = ""
    price: float = 0.0
    formatted_price: str = ""
    original_price: float = 0.0
    formatted_original_price: str = ""
    is_quantity_limited: bool = False
    remaining_count: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "DealOption":
        payload = _as_mapping(payload, "deal option")
        return cls(
            title=_str(payload.get("title")),
            purchase_url=_str(_pick(payload, "purchase_url", "Purchase_URL")),
            price=_float(payload.get("price")),
            formatted_price=_str(_pick(payload, "formatted_price", "Formatted_price")),
            original_price=_float(_pick(payload, "original_price", "Original_price")),
            formatted_original_price=_str(_pick(payload, "formatted_original_price", "Formatted_original_price")),
            is_quantity_limited=_bool(_pick(payload, "is_quantity_limited", "Is_quantity_limited")),
            remaining_count=_int(_pick(payload, "remaining_count", "Remaining_count"), default=None),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Deal:
    id: str = ""
    title: str = ""
    url: str = ""
    image_url: str = ""
    currency_code: str = ""
    time_start: float = 0.0
    time_end: Optional[float] = None
    is_popular: bool = False
    what_you_get: str = ""
    important_restrictions: str = ""
    additional_restrictions: str = ""
    options: List[DealOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Deal":
        payload = _as_mapping(payload, "deal")
        return cls(
            id=_str(payload.get("id")),
            title=_str(payload.get("title")),
            url=_str(payload.get("url")),
            image_url=_str(_pick(payload, "image_url", "image_URL")),
            currency_code=_str(payload.get("currency_code")),
            time_start=_float(payload.get("time_start")),
            time_end=_float(payload.get("time_end"), default=None),
            is_popular=_bool(payload.get("is_popular")),
            what_you_get=_str(payload.get("what_you_get")),
            important_restrictions=_str(_pick(payload, "important_restrictions", "Important_restrictions")),
            additional_restrictions=_str(_pick(payload, "additional_restrictions", "Additional_restrictions")),
            options=_records(payload.get("options"), "deal options", DealOption.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class GiftCertificateOption:
    price: float = 0.0
    formatted_price: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "GiftCertificateOption":
        payload = _as_mapping(payload, "gift certificate option")
        return cls(price=_float(payload.get("price")), formatted_price=_str(payload.get("formatted_price")))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class GiftCertificate:
    """Gift certificate offered by a business; ``unused_balances`` is CASH or CREDIT."""

    id: str = ""
    url: str = ""
    image_url: str = ""
    currency_code: str = ""
    unused_balances: str = ""
    options: List[GiftCertificateOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "GiftCertificate":
        payload = _as_mapping(payload, "gift certificate")
        return cls(
            id=_str(payload.get("id")),
            url=_str(payload.get("url")),
            image_url=_str(_pick(payload, "image_url", "image_URL")),
            currency_code=_str(payload.get("currency_code")),
            unused_balances=_str(payload.get("unused_balances")),
            options=_records(payload.get("options"), "gift certificate options", GiftCertificateOption.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Open:
    """One opening window. ``day`` runs 0-6 from Monday; times are "HHMM"."""

    day: int = 0
    start: str = ""
    end: str = ""
    is_overnight: bool = False

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Open":
        payload = _as_mapping(payload, "open")
        return cls(
            day=_int(payload.get("day")),
            start=_str(payload.get("start")),
            end=_str(payload.get("end")),
            is_overnight=_bool(_pick(payload, "is_overnight", "Is_overnight")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Hours:
    hours_type: str = ""
    is_open_now: bool = False
    open: List[Open] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Hours":
        payload = _as_mapping(payload, "hours")
        return cls(
            hours_type=_str(payload.get("hours_type")),
            is_open_now=_bool(_pick(payload, "is_open_now", "Is_open_now")),
            open=_records(_pick(payload, "open", "Open"), "open", Open.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _business_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "id": _str(payload.get("id")),
        "alias": _str(payload.get("alias")),
        "name": _str(payload.get("name")),
        "image_url": _str(_pick(payload, "image_url", "image_URL")),
        "is_closed": _bool(payload.get("is_closed")),
        "url": _str(payload.get("url")),
        "review_count": _int(payload.get("review_count")),
        "categories": _records(payload.get("categories"), "categories", Category.from_dict),
        "rating": _float(payload.get("rating")),
        "coordinates": Coordinates.from_dict(payload.get("coordinates")),
        "transactions": _str_list(payload.get("transactions"), "transactions"),
        "price": _str(payload.get("price")),
        "location": Location.from_dict(payload.get("location")),
        "phone": _str(payload.get("phone")),
        "display_phone": _str(payload.get("display_phone")),
        "distance": _float(payload.get("distance"), default=None),
    }


@dataclass(slots=True)
class Business:
    """Business as returned by search.

    ``phone`` is E.164, ``price`` one of "$" to "$$$$" or empty, and ``distance``
    is in meters and only set when the query supplied a point.
    """

    id: str = ""
    alias: str = ""
    name: str = ""
    image_url: str = ""
    is_closed: bool = False
    url: str = ""
    review_count: int = 0
    categories: List[Category] = field(default_factory=list)
    rating: float = 0.0
    coordinates: Coordinates = field(default_factory=Coordinates)
    transactions: List[str] = field(default_factory=list)
    price: str = ""
    location: Location = field(default_factory=Location)
    phone: str = ""
    display_phone: str = ""
    distance: Optional[float] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Business":
        return cls(**_business_fields(_as_mapping(payload, "business")))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _first_hours_block(value: Any) -> Hours:
    # The live API sends a list of blocks; older payloads used a single object.
    if isinstance(value, list):
        return Hours.from_dict(value[0]) if value else Hours()
    return Hours.from_dict(value)


@dataclass(slots=True)
class BusinessDetail(Business):
    """Business as returned by the business endpoint, with hours and claim status."""

    hours: Hours = field(default_factory=Hours)
    is_claimed: bool = False
    photos: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "BusinessDetail":
        payload = _as_mapping(payload, "business")
        return cls(
            **_business_fields(payload),
            hours=_first_hours_block(_pick(payload, "hours", "hours ")),
            is_claimed=_bool(_pick(payload, "is_claimed", "Is_claimed")),
            photos=_str_list(payload.get("photos"), "photos"),
        )


@dataclass(slots=True)
class SearchResult:
    """Result of a search; ``total`` counts all matches, not just this page."""

    region: Region = field(default_factory=Region)
    total: int = 0
    businesses: List[Business] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SearchResult":
        payload = _as_mapping(payload, "search result")
        return cls(
            region=Region.from_dict(payload.get("region")),
            total=_int(payload.get("total")),
            businesses=_records(payload.get("businesses"), "businesses", Business.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
