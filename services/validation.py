import logging

from pydantic import ValidationError

from models import ApartmentData

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = [
    "propertyType", "price", "size", "city", "district", "exactLocation",
    "rooms", "floor", "totalFloors", "buildingType", "condition",
    "yearBuilt", "description",
]

MISSING_FIELDS_MESSAGE = "Barcha maydonlar to'ldirilishi shart"
NON_POSITIVE_MESSAGE = "Narx, maydon, xonalar, qavat va qurilgan yil musbat raqam bo'lishi kerak"
INVALID_VALUE_MESSAGE = "Noto'g'ri qiymat: {field}"

MIN_YEAR_BUILT = 1900


class ListingValidationError(ValueError):
    """Listing rejected before scoring; message is shown to the user."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.message = message
        self.field = field


def _is_blank(value) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)):
        return value == 0
    return False


def validate_listing(payload) -> ApartmentData:
    """Check a raw JSON payload and build the listing from it."""
    if not isinstance(payload, dict):
        raise ListingValidationError(MISSING_FIELDS_MESSAGE)

    missing = [field for field in REQUIRED_FIELDS if _is_blank(payload.get(field))]
    if missing:
        logger.warning(f"Listing rejected, missing fields: {', '.join(missing)}")
        raise ListingValidationError(MISSING_FIELDS_MESSAGE, field=missing[0])

    try:
        data = ApartmentData.model_validate(payload)
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        logger.warning(f"Listing rejected, invalid value for {field}")
        raise ListingValidationError(INVALID_VALUE_MESSAGE.format(field=field), field=field)

    numbers = {
        "price": data.price,
        "size": data.size,
        "rooms": data.rooms,
        "floor": data.floor,
        "totalFloors": data.total_floors,
    }
    non_positive = [field for field, value in numbers.items() if not value > 0]
    if not data.year_built > MIN_YEAR_BUILT:
        non_positive.append("yearBuilt")

    if non_positive:
        logger.warning(f"Listing rejected, out of range: {', '.join(non_positive)}")
        raise ListingValidationError(NON_POSITIVE_MESSAGE, field=non_positive[0])

    return data
