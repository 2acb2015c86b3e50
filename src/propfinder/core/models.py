"""
Data Models for the PropFinder API

Dataclass definitions for listings and the filters accepted by the
properties endpoint.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Union

Number = Union[int, float]


@dataclass
class Coordinates:
    lat: float
    lng: float


@dataclass
class Location:
    """Where a listing is."""

    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    coordinates: Optional[Coordinates] = None


@dataclass
class Features:
    """Countable features; any of them may be unknown."""

    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    area: Optional[Number] = None
    parking_spaces: Optional[int] = None


@dataclass
class AgentSummary:
    """Listing agent, taken from the agents/user_profiles join."""

    id: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None


@dataclass
class Property:
    """A real-estate listing as returned by the API."""

    id: str
    title: str
    description: str
    price: Number
    property_type: str  # apartment | house | commercial | land
    transaction_type: str  # sale | rent
    location: Location = field(default_factory=Location)
    features: Features = field(default_factory=Features)
    images: List[str] = field(default_factory=list)
    status: str = "active"  # active | inactive | sold | rented
    created_at: str = ""
    updated_at: str = ""
    owner_id: Optional[str] = None
    agent_id: Optional[str] = None
    agent: Optional[AgentSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary.

        Optional fields that are unset are left out, matching the shape the
        web client expects.
        """
        data = asdict(self)
        if self.location.coordinates is None:
            data["location"].pop("coordinates")
        data["features"] = {k: v for k, v in data["features"].items() if v is not None}
        for key in ("owner_id", "agent_id", "agent"):
            if data[key] is None:
                data.pop(key)
        return data


@dataclass
class PropertyFilters:
    """Optional filters for the property listing.

    A filter is only applied when its value is truthy, so 0 and "" mean
    "not set".
    """

    property_type: Optional[str] = None
    transaction_type: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    city: Optional[str] = None
    bedrooms: Optional[int] = None
    state: Optional[str] = None
    bathrooms: Optional[int] = None
    min_area: Optional[float] = None
    max_area: Optional[float] = None

    def applied(self) -> Dict[str, Any]:
        """Return only the filters that will be applied."""
        return {k: v for k, v in asdict(self).items() if v}
