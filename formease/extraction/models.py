from dataclasses import dataclass, fields
from enum import Enum


class TimeOfDay(str, Enum):
    """Allowed values of the inferred favorite-time-of-day field."""

    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    NIGHT = "Night"


@dataclass(frozen=True)
class ExtractedRecord:
    """Output of the extraction step. Undetected fields are empty strings."""

    first_name: str = ""
    surname: str = ""
    address: str = ""
    postcode: str = ""
    email: str = ""
    favorite_time_of_day: str = ""

    @property
    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))

    def to_contract_dict(self) -> dict[str, str]:
        """Return the record keyed by contract (form field) names."""
        return {key: getattr(self, attr) for attr, key in CONTRACT_FIELDS}


# (record attribute, contract key) in contract order.
CONTRACT_FIELDS: tuple[tuple[str, str], ...] = (
    ("first_name", "firstName"),
    ("surname", "surname"),
    ("address", "address"),
    ("postcode", "postcode"),
    ("email", "email"),
    ("favorite_time_of_day", "favoriteTimeOfDay"),
)

CONTRACT_KEYS: tuple[str, ...] = tuple(key for _, key in CONTRACT_FIELDS)
