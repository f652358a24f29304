"""Pydantic schema definitions for hospital profile records.

This module declares the shape of a facility record and every field-level
constraint. Models are frozen and sequences are stored as tuples, so a
validated record is an immutable value compared by structure.

Field names are camelCase on the wire (``postalCode``, ``contactPoints``)
and snake_case in Python. Either spelling is accepted on input; error
locations are always reported with the camelCase alias.

Custom messages are raised as ``PydanticCustomError`` so the message text
reaches the caller unchanged (no "Value error, " prefix).
"""
import math
import re
from typing import Annotated, Any, Dict, Literal, Optional, Tuple

from pydantic import AfterValidator, AnyUrl, BaseModel, BeforeValidator, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

SERVICE_KINDS = ("Therapy", "Procedure")
ServiceKind = Literal["Therapy", "Procedure"]

_url_adapter = TypeAdapter(AnyUrl)

number_re = re.compile(r"^\s*[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?\s*$")


def _required(message: str):
    """Return a ``str`` type that rejects the empty string with ``message``."""
    def check(value: str) -> str:
        if not value:
            raise PydanticCustomError("text_required", message)
        return value
    return Annotated[str, AfterValidator(check)]


def _at_least_one(message: str):
    def check(value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        if len(value) < 1:
            raise PydanticCustomError("too_short", message)
        return value
    return AfterValidator(check)


def _coordinate(label: str, bound: int):
    """Return a ``float`` type limited to ``[-bound, bound]``.

    Values that do not parse as numbers fail with the same range message.
    Text must be a plain decimal number such as ``"39.8"`` or ``"-8.9e1"``.
    """
    message = f"{label} must be between {-bound} and {bound}"

    def check(value: Any) -> float:
        if isinstance(value, bool) or (isinstance(value, str) and not number_re.match(value)):
            number = math.nan
        else:
            try:
                number = float(value)
            except (TypeError, ValueError, OverflowError):
                number = math.nan
        if not -bound <= number <= bound:
            raise PydanticCustomError("coordinate_range", message)
        return number
    return Annotated[float, BeforeValidator(check)]


def _check_url(value: str) -> str:
    value = value.strip()
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url", "Must be a valid URL") from None
    return value


Url = Annotated[str, AfterValidator(_check_url)]


class _Schema(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class PostalAddress(_Schema):
    """Postal address of a facility.

    Attributes:
        street: Street line, mapped to ``streetAddress``.
        locality: City, mapped to ``addressLocality``.
        region: State or region, mapped to ``addressRegion``.
        postal_code: Postal code.
        country: Country, mapped to ``addressCountry``.
    """
    street: _required("Street address is required")
    locality: _required("City is required")
    region: _required("State/Region is required")
    postal_code: _required("Postal code is required")
    country: _required("Country is required")


class GeoCoordinates(_Schema):
    """Position of the facility.

    Attributes:
        latitude: Degrees north, within [-90, 90].
        longitude: Degrees east, within [-180, 180].
    """
    latitude: _coordinate("Latitude", 90)
    longitude: _coordinate("Longitude", 180)


class MedicalSpecialty(_Schema):
    """A medical specialty practised at the facility, e.g. ``"Cardiology"``."""
    name: _required("Specialty name is required")


class AvailableService(_Schema):
    """A therapy or procedure offered by the facility.

    ``kind`` doubles as the JSON-LD type label of the service.
    """
    kind: ServiceKind
    name: _required("Service name is required")


class ContactPoint(_Schema):
    """A phone contact for one purpose.

    Attributes:
        telephone: Phone number (free-form).
        contact_type: Purpose, e.g. ``"customer service"`` or ``"emergency"``.
        area_served: Optional region code the contact covers.
        available_language: Languages spoken, at least one.
    """
    telephone: _required("Telephone is required")
    contact_type: _required("Contact type is required")
    area_served: Optional[str] = None
    available_language: Annotated[Tuple[str, ...], _at_least_one("At least one language required")]


class FacilityRecord(_Schema):
    """A hospital's public profile.

    Attributes:
        name: Human-readable hospital name.
        description: Free-text description.
        url: Absolute website URL.
        telephone: Main phone number (free-form).
        address: Postal address.
        geo: Latitude/longitude of the main entrance.
        opening_hours: Free-form schedule, e.g. ``"Mo-Su 00:00-24:00"``.
        specialties: Medical specialties, at least one.
        services: Therapies and procedures, at least one.
        contact_points: Contact points, at least one.
        same_as: Optional profile URLs (social media, directories).
    """
    name: _required("Hospital name is required")
    description: _required("Description is required")
    url: Url
    telephone: _required("Telephone is required")
    address: PostalAddress
    geo: GeoCoordinates
    opening_hours: _required("Opening hours are required")
    specialties: Annotated[Tuple[MedicalSpecialty, ...], _at_least_one("At least one specialty is required")]
    services: Annotated[Tuple[AvailableService, ...], _at_least_one("At least one service is required")]
    contact_points: Annotated[Tuple[ContactPoint, ...], _at_least_one("At least one contact point is required")]
    same_as: Optional[Tuple[Url, ...]] = None


def new_draft() -> Dict[str, Any]:
    """Return an unvalidated draft record with the form's default values."""
    return {
        "name": "",
        "description": "",
        "url": "",
        "telephone": "",
        "address": {
            "street": "",
            "locality": "",
            "region": "",
            "postalCode": "",
            "country": "US",
        },
        "geo": {"latitude": 0, "longitude": 0},
        "openingHours": "",
        "specialties": [{"name": ""}],
        "services": [{"kind": "Therapy", "name": ""}],
        "contactPoints": [
            {
                "telephone": "",
                "contactType": "customer service",
                "areaServed": "US",
                "availableLanguage": ["English"],
            }
        ],
        "sameAs": [],
    }
