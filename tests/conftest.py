import pytest

from models import ApartmentData


def make_listing(**overrides) -> dict:
    listing = {
        "propertyType": "sale",
        "price": 112800,
        "size": 100,
        "city": "Toshkent Shahri",
        "district": "Chilonzor",
        "exactLocation": "Chilonzor 9-kvartal, 12-uy",
        "rooms": 3,
        "floor": 4,
        "totalFloors": 9,
        "buildingType": "apartment",
        "condition": "good",
        "yearBuilt": 2015,
        "description": "Zamonaviy kvartira, konditsioner, metroga yaqin",
    }
    listing.update(overrides)
    return listing


@pytest.fixture
def listing():
    return make_listing


@pytest.fixture
def apartment():
    def build(**overrides):
        return ApartmentData.model_validate(make_listing(**overrides))
    return build
