"""
Domain types for RideWithGPS responses.

Every record is a read-only projection of the API's JSON with every field
optional. Detail records embed their summary record rather than subclass it,
so list views never carry the heavy nested collections.

Zero values are kept as-is here; display rules live in the renderers.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, TypeVar

from ridewithgps_mcp.errors import RenderingError


T = TypeVar("T")


def _obj(value: Any, label: str) -> dict:
    """Return value as a dict; None becomes {}."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RenderingError(f"Expected {label} to be an object, got {type(value).__name__}")
    return value


def _objects(value: Any, label: str) -> List[dict]:
    """Return value as a list of dicts; None becomes []."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise RenderingError(f"Expected {label} to be a list, got {type(value).__name__}")
    return [_obj(v, label) for v in value]


def _num(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass
class Bounds:
    """Bounding box of a route or trip."""
    sw_lat: Optional[float] = None
    sw_lng: Optional[float] = None
    ne_lat: Optional[float] = None
    ne_lng: Optional[float] = None

    @classmethod
    def from_dict(cls, d: dict) -> Optional["Bounds"]:
        """Bounds from the sw_/ne_ fields, or None if any corner is missing or zero."""
        bounds = cls(
            sw_lat=_num(d.get("sw_lat")),
            sw_lng=_num(d.get("sw_lng")),
            ne_lat=_num(d.get("ne_lat")),
            ne_lng=_num(d.get("ne_lng")),
        )
        if not all((bounds.sw_lat, bounds.sw_lng, bounds.ne_lat, bounds.ne_lng)):
            return None
        return bounds


@dataclass
class Pagination:
    """List envelope metadata. No next_page_url means this is the last page."""
    record_count: Optional[int] = None
    next_page_url: Optional[str] = None

    @classmethod
    def from_meta(cls, meta: Any) -> Optional["Pagination"]:
        pagination = _obj(meta, "meta").get("pagination")
        if pagination is None:
            return None
        pagination = _obj(pagination, "meta.pagination")
        return cls(
            record_count=pagination.get("record_count"),
            next_page_url=pagination.get("next_page_url") or None,
        )

    @property
    def has_next_page(self) -> bool:
        return bool(self.next_page_url)


@dataclass
class Page(Generic[T]):
    """One page of a list endpoint."""
    items: List[T] = field(default_factory=list)
    pagination: Optional[Pagination] = None

    @classmethod
    def from_response(cls, response: Any, key: str, parse: Callable[[dict], T]) -> "Page[T]":
        response = _obj(response, "response")
        return cls(
            items=[parse(item) for item in _objects(response.get(key), key)],
            pagination=Pagination.from_meta(response.get("meta")),
        )


@dataclass
class RouteSummary:
    """Route fields present in both list and detail views."""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    locality: Optional[str] = None
    administrative_area: Optional[str] = None
    country_code: Optional[str] = None
    distance: Optional[float] = None
    elevation_gain: Optional[float] = None
    elevation_loss: Optional[float] = None
    track_type: Optional[str] = None
    terrain: Optional[str] = None
    difficulty: Optional[str] = None
    surface: Optional[str] = None
    unpaved_pct: Optional[float] = None
    bounds: Optional[Bounds] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "RouteSummary":
        return cls(
            id=d.get("id"),
            name=_str(d.get("name")),
            description=_str(d.get("description")),
            locality=_str(d.get("locality")),
            administrative_area=_str(d.get("administrative_area")),
            country_code=_str(d.get("country_code")),
            distance=_num(d.get("distance")),
            elevation_gain=_num(d.get("elevation_gain")),
            elevation_loss=_num(d.get("elevation_loss")),
            track_type=_str(d.get("track_type")),
            terrain=_str(d.get("terrain")),
            difficulty=_str(d.get("difficulty")),
            surface=_str(d.get("surface")),
            unpaved_pct=_num(d.get("unpaved_pct")),
            bounds=Bounds.from_dict(d),
            created_at=_str(d.get("created_at")),
            updated_at=_str(d.get("updated_at")),
        )


@dataclass
class TrackPoint:
    lat: Optional[float] = None
    lng: Optional[float] = None
    elevation: Optional[float] = None
    distance: Optional[float] = None

    @classmethod
    def from_dict(cls, d: dict) -> "TrackPoint":
        # API uses x/y/e/d shorthand for lng/lat/elevation/distance
        return cls(
            lat=_num(d.get("y", d.get("lat"))),
            lng=_num(d.get("x", d.get("lng"))),
            elevation=_num(d.get("e")),
            distance=_num(d.get("d")),
        )


@dataclass
class CoursePoint:
    """A cue along a route (turn, summit, food stop...)."""
    label: Optional[str] = None
    kind: Optional[str] = None
    distance: Optional[float] = None
    lat: Optional[float] = None
    lng: Optional[float] = None

    @classmethod
    def from_dict(cls, d: dict) -> "CoursePoint":
        return cls(
            label=_str(d.get("n") or d.get("name") or d.get("notes")),
            kind=_str(d.get("t") or d.get("type")),
            distance=_num(d.get("d", d.get("distance"))),
            lat=_num(d.get("y", d.get("lat"))),
            lng=_num(d.get("x", d.get("lng"))),
        )


@dataclass
class PointOfInterest:
    id: Optional[int] = None
    name: Optional[str] = None
    kind: Optional[str] = None
    description: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None

    @classmethod
    def from_dict(cls, d: dict) -> "PointOfInterest":
        return cls(
            id=d.get("id"),
            name=_str(d.get("name")),
            kind=_str(d.get("poi_type_name") or d.get("poi_type")),
            description=_str(d.get("description")),
            lat=_num(d.get("lat")),
            lng=_num(d.get("lng")),
        )


@dataclass
class RouteDetail:
    """A route plus its nested collections (detail view only)."""
    summary: RouteSummary
    track_points: List[TrackPoint] = field(default_factory=list)
    course_points: List[CoursePoint] = field(default_factory=list)
    points_of_interest: List[PointOfInterest] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> "RouteDetail":
        return cls(
            summary=RouteSummary.from_dict(d),
            track_points=[TrackPoint.from_dict(p) for p in _objects(d.get("track_points"), "track_points")],
            course_points=[CoursePoint.from_dict(p) for p in _objects(d.get("course_points"), "course_points")],
            points_of_interest=[
                PointOfInterest.from_dict(p)
                for p in _objects(d.get("points_of_interest"), "points_of_interest")
            ],
        )


@dataclass
class TripSummary:
    """Trip fields present in both list and detail views."""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    activity_type: Optional[str] = None
    departed_at: Optional[str] = None
    locality: Optional[str] = None
    administrative_area: Optional[str] = None
    country_code: Optional[str] = None
    distance: Optional[float] = None
    duration: Optional[float] = None
    moving_time: Optional[float] = None
    elevation_gain: Optional[float] = None
    elevation_loss: Optional[float] = None
    avg_speed: Optional[float] = None
    max_speed: Optional[float] = None
    avg_hr: Optional[float] = None
    max_hr: Optional[float] = None
    avg_watts: Optional[float] = None
    avg_cad: Optional[float] = None
    calories: Optional[float] = None
    bounds: Optional[Bounds] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "TripSummary":
        return cls(
            id=d.get("id"),
            name=_str(d.get("name")),
            description=_str(d.get("description")),
            activity_type=_str(d.get("activity_type")),
            departed_at=_str(d.get("departed_at")),
            locality=_str(d.get("locality")),
            administrative_area=_str(d.get("administrative_area")),
            country_code=_str(d.get("country_code")),
            distance=_num(d.get("distance")),
            duration=_num(d.get("duration")),
            moving_time=_num(d.get("moving_time")),
            elevation_gain=_num(d.get("elevation_gain")),
            elevation_loss=_num(d.get("elevation_loss")),
            avg_speed=_num(d.get("avg_speed")),
            max_speed=_num(d.get("max_speed")),
            avg_hr=_num(d.get("avg_hr")),
            max_hr=_num(d.get("max_hr")),
            avg_watts=_num(d.get("avg_watts")),
            avg_cad=_num(d.get("avg_cad")),
            calories=_num(d.get("calories")),
            bounds=Bounds.from_dict(d),
            created_at=_str(d.get("created_at")),
            updated_at=_str(d.get("updated_at")),
        )


@dataclass
class TripDetail:
    summary: TripSummary
    track_points: List[TrackPoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> "TripDetail":
        return cls(
            summary=TripSummary.from_dict(d),
            track_points=[TrackPoint.from_dict(p) for p in _objects(d.get("track_points"), "track_points")],
        )


@dataclass
class EventSummary:
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    locality: Optional[str] = None
    administrative_area: Optional[str] = None
    country_code: Optional[str] = None
    starts_at: Optional[str] = None
    ends_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "EventSummary":
        return cls(
            id=d.get("id"),
            name=_str(d.get("name")),
            description=_str(d.get("description")),
            locality=_str(d.get("locality")),
            administrative_area=_str(d.get("administrative_area")),
            country_code=_str(d.get("country_code")),
            starts_at=_str(d.get("starts_at")),
            ends_at=_str(d.get("ends_at")),
            created_at=_str(d.get("created_at")),
            updated_at=_str(d.get("updated_at")),
        )


@dataclass
class EventDetail:
    """An event plus summaries of its associated routes."""
    summary: EventSummary
    routes: List[RouteSummary] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> "EventDetail":
        return cls(
            summary=EventSummary.from_dict(d),
            routes=[RouteSummary.from_dict(r) for r in _objects(d.get("routes"), "routes")],
        )


@dataclass
class User:
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "User":
        return cls(
            id=d.get("id"),
            name=_str(d.get("name")),
            email=_str(d.get("email")),
            created_at=_str(d.get("created_at")),
            updated_at=_str(d.get("updated_at")),
        )


@dataclass
class SyncItem:
    """One change record from the sync endpoint."""
    action: Optional[str] = None
    item_type: Optional[str] = None
    item_id: Optional[int] = None
    item_user_id: Optional[int] = None
    datetime: Optional[str] = None
    collection_name: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "SyncItem":
        collection = d.get("collection")
        return cls(
            action=_str(d.get("action")),
            item_type=_str(d.get("item_type")),
            item_id=d.get("item_id"),
            item_user_id=d.get("item_user_id"),
            datetime=_str(d.get("datetime")),
            collection_name=_str(collection.get("name")) if isinstance(collection, dict) else None,
        )


@dataclass
class SyncDelta:
    """Ordered change records plus the cursor to resume from."""
    items: List[SyncItem] = field(default_factory=list)
    rwgps_datetime: Optional[str] = None
    next_sync_url: Optional[str] = None

    @classmethod
    def from_response(cls, response: Any) -> "SyncDelta":
        response = _obj(response, "response")
        meta = _obj(response.get("meta"), "meta")
        return cls(
            items=[SyncItem.from_dict(i) for i in _objects(response.get("items"), "items")],
            rwgps_datetime=_str(meta.get("rwgps_datetime")),
            next_sync_url=_str(meta.get("next_sync_url")),
        )


def detail_from_response(response: Any, key: str, parse: Callable[[dict], T]) -> Optional[T]:
    """Parse the single entity under response[key], or None if it is absent."""
    entity = _obj(response, "response").get(key)
    if not entity:
        return None
    return parse(_obj(entity, key))
