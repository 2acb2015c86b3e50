"""
Sample listings served when the hosted database is unavailable.
"""

from typing import List

from propfinder.core.models import Coordinates, Features, Location, Property
from propfinder.utils.formatting import iso_timestamp


def sample_properties() -> List[Property]:
    """Build the fallback listings with fresh timestamps."""
    now = iso_timestamp()
    return [
        Property(
            id="1",
            title="Moderno Apartamento en Centro",
            description=(
                "Hermoso apartamento de 2 habitaciones en el corazón de la ciudad, "
                "completamente amueblado con acabados de lujo."
            ),
            price=250000,
            property_type="apartment",
            transaction_type="sale",
            location=Location(
                address="Av. Principal 123",
                city="Ciudad de México",
                state="CDMX",
                country="México",
                coordinates=Coordinates(lat=19.4326, lng=-99.1332),
            ),
            features=Features(bedrooms=2, bathrooms=2, area=85, parking_spaces=1),
            images=[
                "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?w=800",
                "https://images.unsplash.com/photo-1567496898669-ee935f5f647a?w=800",
            ],
            status="active",
            created_at=now,
            updated_at=now,
        ),
        Property(
            id="2",
            title="Casa Familiar con Jardín",
            description=(
                "Espaciosa casa de 3 habitaciones con amplio jardín, "
                "perfecta para familias."
            ),
            price=450000,
            property_type="house",
            transaction_type="sale",
            location=Location(
                address="Calle Las Flores 456",
                city="Guadalajara",
                state="Jalisco",
                country="México",
                coordinates=Coordinates(lat=20.6597, lng=-103.3496),
            ),
            features=Features(bedrooms=3, bathrooms=2, area=150, parking_spaces=2),
            images=[
                "https://images.unsplash.com/photo-1570129477492-45c003edd2be?w=800",
                "https://images.unsplash.com/photo-1605146769289-440113cc3d00?w=800",
            ],
            status="active",
            created_at=now,
            updated_at=now,
        ),
        Property(
            id="3",
            title="Departamento en Renta Zona Valle",
            description=(
                "Departamento de 1 habitación con vista a la sierra, "
                "a pasos de restaurantes y oficinas."
            ),
            price=18000,
            property_type="apartment",
            transaction_type="rent",
            location=Location(
                address="Av. Vasconcelos 789",
                city="San Pedro Garza García",
                state="Nuevo León",
                country="México",
                coordinates=Coordinates(lat=25.6573, lng=-100.4023),
            ),
            features=Features(bedrooms=1, bathrooms=1, area=60, parking_spaces=1),
            images=[
                "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688?w=800",
            ],
            status="active",
            created_at=now,
            updated_at=now,
        ),
    ]
