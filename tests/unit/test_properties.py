"""
Unit tests for the properties service.
"""

import pytest

from propfinder.core.models import PropertyFilters
from propfinder.core.properties import (
    PropertiesService,
    filter_properties,
    row_to_property,
)
from propfinder.exceptions import ConfigurationError


def _ids(properties):
    return [p.id for p in properties]


class TestRowToProperty:
    """Tests for reshaping database rows."""

    def test_full_row(self, property_rows):
        prop = row_to_property(property_rows[0])

        assert prop.id == "101"
        assert prop.price == 1200000
        assert prop.location.city == "Ciudad de México"
        assert prop.location.country == "México"
        assert prop.location.coordinates.lat == pytest.approx(19.4333)
        assert prop.features.bedrooms == 3
        assert prop.features.parking_spaces == 2
        assert prop.status == "active"
        assert prop.agent_id == "agent-1"
        assert prop.agent.full_name == "Laura Méndez"

    def test_numeric_strings_and_features_column(self, property_rows):
        prop = row_to_property(property_rows[1])

        assert prop.price == 380000
        assert isinstance(prop.price, int)
        assert prop.features.parking_spaces == 2
        assert prop.updated_at == prop.created_at
        assert prop.agent is None

    def test_images_sorted_by_display_order(self, property_rows):
        prop = row_to_property(property_rows[2])
        assert prop.images == [
            "https://cdn.example.com/a.jpg",
            "https://cdn.example.com/b.jpg",
        ]

    def test_images_list_column(self):
        prop = row_to_property({"id": 1, "images": ["x.jpg"]})
        assert prop.images == ["x.jpg"]

    def test_inactive_row_without_status(self):
        prop = row_to_property({"id": 1, "is_active": False})
        assert prop.status == "inactive"

    def test_unknown_status_defaults_to_active(self):
        prop = row_to_property({"id": 1, "status": "draft"})
        assert prop.status == "active"

    def test_to_dict_drops_unset_optionals(self, property_rows):
        data = row_to_property(property_rows[2]).to_dict()

        assert "coordinates" not in data["location"]
        assert data["features"] == {"area": 95}
        assert "agent" not in data
        assert "agent_id" not in data

    def test_to_dict_keeps_agent(self, property_rows):
        data = row_to_property(property_rows[0]).to_dict()
        assert data["agent"]["email"] == "laura@example.com"
        assert data["location"]["coordinates"] == {"lat": 19.4333, "lng": -99.195}


class TestFilterProperties:
    """Tests for in-memory filtering."""

    @pytest.fixture
    def properties(self, property_rows):
        return [row_to_property(row) for row in property_rows]

    def test_no_filters_returns_all(self, properties):
        assert _ids(filter_properties(properties, PropertyFilters())) == ["101", "102", "103"]

    def test_property_type(self, properties):
        result = filter_properties(properties, PropertyFilters(property_type="house"))
        assert _ids(result) == ["102"]

    def test_transaction_type(self, properties):
        result = filter_properties(properties, PropertyFilters(transaction_type="rent"))
        assert _ids(result) == ["103"]

    def test_price_range(self, properties):
        assert _ids(filter_properties(properties, PropertyFilters(min_price=300000))) == ["101", "102"]
        assert _ids(filter_properties(properties, PropertyFilters(max_price=400000))) == ["102", "103"]

    def test_zero_price_is_not_a_filter(self, properties):
        result = filter_properties(properties, PropertyFilters(min_price=0, max_price=0))
        assert len(result) == 3

    def test_city_is_case_insensitive_substring(self, properties):
        assert _ids(filter_properties(properties, PropertyFilters(city="guada"))) == ["103"]
        assert _ids(filter_properties(properties, PropertyFilters(city="MÉXICO"))) == ["101"]

    def test_bedrooms_excludes_unknown(self, properties):
        assert _ids(filter_properties(properties, PropertyFilters(bedrooms=3))) == ["101"]

    def test_state_and_bathrooms(self, properties):
        assert _ids(filter_properties(properties, PropertyFilters(state="jalisco"))) == ["102", "103"]
        assert _ids(filter_properties(properties, PropertyFilters(bathrooms=2))) == ["102"]

    def test_area_range(self, properties):
        assert _ids(filter_properties(properties, PropertyFilters(min_area=100))) == ["101", "102"]
        assert _ids(filter_properties(properties, PropertyFilters(max_area=100))) == ["103"]

    def test_filters_combine(self, properties):
        filters = PropertyFilters(transaction_type="sale", min_price=500000)
        assert _ids(filter_properties(properties, filters)) == ["101"]

    def test_applied_lists_only_set_filters(self):
        filters = PropertyFilters(city="Zapopan", min_price=0)
        assert filters.applied() == {"city": "Zapopan"}


class TestPropertiesServiceDatabase:
    """Tests for PropertiesService backed by the database."""

    def test_find_all(self, db_service):
        service = PropertiesService()
        assert _ids(service.find_all()) == ["101", "102", "103"]

    def test_find_one(self, db_service):
        prop = PropertiesService().find_one("103")
        assert prop.title == "Local Comercial Centro"

    def test_find_one_missing(self, db_service):
        assert PropertiesService().find_one("999") is None

    def test_find_by_filters(self, db_service):
        result = PropertiesService().find_by_filters(PropertyFilters(city="zapopan"))
        assert _ids(result) == ["102"]


class TestPropertiesServiceFallback:
    """Tests for the sample-data fallback."""

    def test_three_sample_properties(self):
        service = PropertiesService()
        assert _ids(service.fallback_properties) == ["1", "2", "3"]

    def test_missing_credentials_fall_back(self):
        # no SUPABASE_* variables are set in tests
        assert _ids(PropertiesService().find_all()) == ["1", "2", "3"]

    def test_database_error_falls_back(self, failing_db_service):
        assert _ids(PropertiesService().find_all()) == ["1", "2", "3"]

    def test_custom_factory_error_falls_back(self):
        def broken():
            raise ConfigurationError("no database")

        service = PropertiesService(db_factory=broken)
        assert len(service.find_all()) == 3

    def test_find_one_uses_sample_data(self, failing_db_service):
        service = PropertiesService()
        assert service.find_one("2").title == "Casa Familiar con Jardín"
        assert service.find_one("999") is None

    def test_filters_apply_to_sample_data(self):
        service = PropertiesService()
        assert _ids(service.find_by_filters(PropertyFilters(transaction_type="rent"))) == ["3"]
        assert _ids(service.find_by_filters(PropertyFilters(bedrooms=2))) == ["1"]
        assert _ids(service.find_by_filters(PropertyFilters(city="guadalajara"))) == ["2"]

    def test_fallback_list_is_not_mutated(self):
        service = PropertiesService()
        service.find_all().clear()
        assert len(service.fallback_properties) == 3
