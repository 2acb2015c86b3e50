"""
Properties Service

Reads listings through the Supabase wrapper, reshapes the flat database
rows into Property objects and applies the listing filters in memory.
Whenever the database cannot be used the bundled sample listings are
served instead.
"""

from typing import Any, Callable, Dict, List, Optional

from propfinder.core.constants import (
    DEFAULT_COUNTRY,
    PROPERTY_STATUSES,
    STATUS_ACTIVE,
    STATUS_INACTIVE,
)
from propfinder.core.database import SupabaseService, get_supabase_service
from propfinder.core.models import (
    AgentSummary,
    Coordinates,
    Features,
    Location,
    Property,
    PropertyFilters,
)
from propfinder.core.sample_data import sample_properties
from propfinder.exceptions import PropFinderError
from propfinder.logging_config import get_logger

logger = get_logger(__name__)

Row = Dict[str, Any]


def _as_number(value):
    if value is None or value == "":
        return None
    number = float(value)
    return int(number) if number.is_integer() else number


def _as_int(value) -> Optional[int]:
    number = _as_number(value)
    return int(number) if number is not None else None


def _as_str(value) -> Optional[str]:
    return str(value) if value is not None else None


def _collect_images(row: Row) -> List[str]:
    images = row.get("property_images")
    if images:
        ordered = sorted(images, key=lambda img: img.get("display_order") or 0)
        return [
            img.get("url") or img.get("storage_path")
            for img in ordered
            if img.get("url") or img.get("storage_path")
        ]
    if isinstance(row.get("images"), list):
        return [str(url) for url in row["images"]]
    return []


def _collect_agent(row: Row) -> Optional[AgentSummary]:
    agent = row.get("agents")
    if isinstance(agent, list):
        agent = agent[0] if agent else None
    if not agent:
        return None

    profile = agent.get("user_profiles") or {}
    if isinstance(profile, list):
        profile = profile[0] if profile else {}

    return AgentSummary(
        id=_as_str(agent.get("id")),
        full_name=profile.get("full_name"),
        phone=profile.get("phone"),
        email=profile.get("email"),
        avatar_url=profile.get("avatar_url"),
    )


def _resolve_status(row: Row) -> str:
    status = row.get("status")
    if status in PROPERTY_STATUSES:
        return status
    if row.get("is_active") is False:
        return STATUS_INACTIVE
    return STATUS_ACTIVE


def row_to_property(row: Row) -> Property:
    """Reshape a flat `properties` row into a Property."""
    coordinates = None
    if row.get("latitude") is not None and row.get("longitude") is not None:
        coordinates = Coordinates(
            lat=float(row["latitude"]),
            lng=float(row["longitude"]),
        )

    extra = row.get("features") if isinstance(row.get("features"), dict) else {}
    parking = row.get("parking_spaces")
    if parking is None:
        parking = extra.get("parking_spaces")

    return Property(
        id=str(row["id"]),
        title=row.get("title") or "",
        description=row.get("description") or "",
        price=_as_number(row.get("price")) or 0,
        property_type=row.get("property_type") or "",
        transaction_type=row.get("transaction_type") or "",
        location=Location(
            address=row.get("address") or "",
            city=row.get("city") or "",
            state=row.get("state") or "",
            country=row.get("country") or DEFAULT_COUNTRY,
            coordinates=coordinates,
        ),
        features=Features(
            bedrooms=_as_int(row.get("bedrooms")),
            bathrooms=_as_int(row.get("bathrooms")),
            area=_as_number(row.get("area")),
            parking_spaces=_as_int(parking),
        ),
        images=_collect_images(row),
        status=_resolve_status(row),
        created_at=row.get("created_at") or "",
        updated_at=row.get("updated_at") or row.get("created_at") or "",
        owner_id=_as_str(row.get("owner_id")),
        agent_id=_as_str(row.get("agent_id")),
        agent=_collect_agent(row),
    )


def _in_range(value, low, high) -> bool:
    if value is None:
        return False
    if low and value < low:
        return False
    if high and value > high:
        return False
    return True


def filter_properties(
    properties: List[Property],
    filters: PropertyFilters,
) -> List[Property]:
    """Apply each set filter in turn; unset (falsy) filters are skipped."""
    filtered = properties

    if filters.property_type:
        filtered = [p for p in filtered if p.property_type == filters.property_type]

    if filters.transaction_type:
        filtered = [p for p in filtered if p.transaction_type == filters.transaction_type]

    if filters.min_price:
        filtered = [p for p in filtered if p.price >= filters.min_price]

    if filters.max_price:
        filtered = [p for p in filtered if p.price <= filters.max_price]

    if filters.city:
        city = filters.city.lower()
        filtered = [p for p in filtered if city in p.location.city.lower()]

    if filters.bedrooms:
        filtered = [p for p in filtered if p.features.bedrooms == filters.bedrooms]

    if filters.state:
        state = filters.state.lower()
        filtered = [p for p in filtered if state in p.location.state.lower()]

    if filters.bathrooms:
        filtered = [p for p in filtered if p.features.bathrooms == filters.bathrooms]

    if filters.min_area or filters.max_area:
        filtered = [
            p for p in filtered
            if _in_range(p.features.area, filters.min_area, filters.max_area)
        ]

    return filtered


class PropertiesService:
    """Listing queries with a sample-data fallback."""

    def __init__(self, db_factory: Callable[[], SupabaseService] = get_supabase_service):
        """
        Args:
            db_factory: Returns the database wrapper. Called on every query so
                a database that becomes available later is picked up.
        """
        self._db_factory = db_factory
        self.fallback_properties = sample_properties()

    def find_all(self) -> List[Property]:
        try:
            rows = self._db_factory().get_properties()
        except PropFinderError as e:
            logger.warning("Falling back to sample properties: %s", e)
            return list(self.fallback_properties)

        logger.debug("Fetched %d properties from database", len(rows))
        return [row_to_property(row) for row in rows]

    def find_one(self, property_id: str) -> Optional[Property]:
        try:
            row = self._db_factory().get_property_by_id(property_id)
        except PropFinderError as e:
            logger.warning(
                "Falling back to sample properties for %s: %s", property_id, e
            )
            return next(
                (p for p in self.fallback_properties if p.id == property_id),
                None,
            )

        return row_to_property(row) if row else None

    def find_by_filters(self, filters: PropertyFilters) -> List[Property]:
        properties = self.find_all()
        applied = filters.applied()
        if applied:
            logger.debug("Filtering %d properties by %s", len(properties), applied)
        return filter_properties(properties, filters)
