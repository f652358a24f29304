"""schema.org JSON-LD rendering of hospital records.

``to_document`` maps a validated ``FacilityRecord`` to a ``Hospital``
document. Key order is fixed and sequences keep their input order, so the
serialized output is byte-for-byte stable for equal records.

The mapper does not validate. Callers run ``validation.validate`` first.
"""
import json
from typing import Any, Dict

from hospital_editor.schemas import FacilityRecord

SCHEMA_CONTEXT = "https://schema.org"
HOSPITAL_TYPE = "Hospital"


def to_document(record: FacilityRecord) -> Dict[str, Any]:
    """Return the JSON-LD document for one hospital record."""
    address = record.address
    document: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": HOSPITAL_TYPE,
        "name": record.name,
        "description": record.description,
        "url": record.url,
        "telephone": record.telephone,
        "address": {
            "@type": "PostalAddress",
            "streetAddress": address.street,
            "addressLocality": address.locality,
            "addressRegion": address.region,
            "postalCode": address.postal_code,
            "addressCountry": address.country,
        },
        "geo": {
            "@type": "GeoCoordinates",
            "latitude": record.geo.latitude,
            "longitude": record.geo.longitude,
        },
        "openingHours": record.opening_hours,
        "medicalSpecialty": [
            {"@type": "MedicalSpecialty", "name": s.name} for s in record.specialties
        ],
        # service kind is the type label
        "availableService": [
            {"@type": s.kind, "name": s.name} for s in record.services
        ],
        "contactPoint": [_contact_point(c) for c in record.contact_points],
    }
    if record.same_as is not None:
        document["sameAs"] = list(record.same_as)
    return document


def _contact_point(contact) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "@type": "ContactPoint",
        "telephone": contact.telephone,
        "contactType": contact.contact_type,
    }
    if contact.area_served is not None:
        out["areaServed"] = contact.area_served
    out["availableLanguage"] = list(contact.available_language)
    return out


def to_json(record: FacilityRecord, indent: int = 2) -> str:
    """Pretty-print the JSON-LD document, as shown in the editor and copied for export."""
    return json.dumps(to_document(record), indent=indent, ensure_ascii=False)


def to_script_tag(record: FacilityRecord, indent: int = 2) -> str:
    """Wrap the JSON-LD document in a ``<script>`` element for embedding in a page.

    ``</`` is escaped so a field value cannot close the element early.
    """
    body = to_json(record, indent=indent).replace("</", "<\\/")
    return f'<script type="application/ld+json">\n{body}\n</script>'
