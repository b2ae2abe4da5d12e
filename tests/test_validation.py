import pytest

from services.validation import (
    MISSING_FIELDS_MESSAGE,
    NON_POSITIVE_MESSAGE,
    ListingValidationError,
    validate_listing,
)


def test_valid_listing(listing):
    data = validate_listing(listing())

    assert data.property_type == "sale"
    assert data.total_floors == 9
    assert data.year_built == 2015
    assert data.exact_location.startswith("Chilonzor")


def test_numeric_strings_are_accepted(listing):
    data = validate_listing(listing(price="112800", rooms="3"))
    assert data.price == 112800
    assert data.rooms == 3


@pytest.mark.parametrize("field", ["price", "size", "rooms", "floor", "totalFloors", "yearBuilt"])
def test_zero_is_missing(listing, field):
    with pytest.raises(ListingValidationError) as e:
        validate_listing(listing(**{field: 0}))
    assert e.value.message == MISSING_FIELDS_MESSAGE
    assert e.value.field == field


@pytest.mark.parametrize("field", ["city", "district", "exactLocation", "description"])
def test_blank_text_is_missing(listing, field):
    with pytest.raises(ListingValidationError) as e:
        validate_listing(listing(**{field: "   "}))
    assert e.value.message == MISSING_FIELDS_MESSAGE


def test_absent_field_is_missing(listing):
    payload = listing()
    del payload["description"]

    with pytest.raises(ListingValidationError) as e:
        validate_listing(payload)
    assert e.value.message == MISSING_FIELDS_MESSAGE


@pytest.mark.parametrize("field", ["price", "size", "rooms", "floor", "totalFloors"])
def test_negative_numbers(listing, field):
    with pytest.raises(ListingValidationError) as e:
        validate_listing(listing(**{field: -5}))
    assert e.value.message == NON_POSITIVE_MESSAGE


@pytest.mark.parametrize("year", [1850, 1900])
def test_year_built_after_1900(listing, year):
    with pytest.raises(ListingValidationError) as e:
        validate_listing(listing(yearBuilt=year))
    assert e.value.message == NON_POSITIVE_MESSAGE
    assert e.value.field == "yearBuilt"


def test_year_built_1901(listing):
    assert validate_listing(listing(yearBuilt=1901)).year_built == 1901


@pytest.mark.parametrize("field, value", [
    ("buildingType", "castle"),
    ("condition", "ruined"),
    ("propertyType", "lease"),
    ("price", "abc"),
])
def test_invalid_values(listing, field, value):
    with pytest.raises(ListingValidationError) as e:
        validate_listing(listing(**{field: value}))
    assert e.value.message == f"Noto'g'ri qiymat: {field}"


def test_non_object_payload():
    with pytest.raises(ListingValidationError) as e:
        validate_listing(["not", "a", "listing"])
    assert e.value.message == MISSING_FIELDS_MESSAGE


def test_validation_error_is_value_error():
    assert issubclass(ListingValidationError, ValueError)


@pytest.mark.parametrize("field", ["price", "size"])
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_numbers(listing, field, value):
    with pytest.raises(ListingValidationError) as e:
        validate_listing(listing(**{field: value}))
    assert e.value.message == f"Noto'g'ri qiymat: {field}"
    assert e.value.field == field
