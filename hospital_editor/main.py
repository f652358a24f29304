"""FastAPI application for editing hospital profiles and exporting JSON-LD.

This module provides a small API over an in-memory list of hospital
records: fetch an empty draft, validate a draft, create, list, update and
delete records by position, and render a record as schema.org JSON-LD.

Core components:
- Pydantic response models for list summaries and write results.
- Validation of submitted drafts via ``hospital_editor.validation``.
- JSON-LD rendering via ``hospital_editor.jsonld``.

Notes:
- Records are stored in-memory (the ``hospitals`` list) for the lifetime of
  the process; the position in the list is the record's identity.
- Capacity, export indentation and log level are configurable via constants.
"""
import logging
import os
from typing import Any, Dict, List

from fastapi import Body, FastAPI, HTTPException, Response
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from hospital_editor.jsonld import to_document, to_script_tag
from hospital_editor.schemas import FacilityRecord, new_draft
from hospital_editor.validation import Err, validate

MAX_HOSPITALS = 100
JSONLD_INDENT = 2
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Hospital Profile Editor")
hospitals: List[FacilityRecord] = []


class HospitalSummary(BaseModel):
    """Short listing entry for one stored hospital.

    Attributes:
        index: Zero-based position in the list, used by edit and delete.
        name: Hospital name.
        telephone: Main phone number.
        url: Website URL.
        address: One-line postal address.
    """
    index: int
    name: str
    telephone: str
    url: str
    address: str


class HospitalWriteResult(BaseModel):
    index: int
    hospital: Dict[str, Any]


def _dump(record: FacilityRecord) -> Dict[str, Any]:
    return record.model_dump(mode="json", by_alias=True)


def _one_line_address(record: FacilityRecord) -> str:
    a = record.address
    return f"{a.street}, {a.locality}, {a.region} {a.postal_code}"


def _violations_response(result: Err) -> JSONResponse:
    return JSONResponse(status_code=422, content={"valid": False, "errors": result.violations})


def _lookup(index: int) -> FacilityRecord:
    """Return the record at ``index``.

    Raises:
        HTTPException(404) if no record is stored at that position.
    """
    if index < 0 or index >= len(hospitals):
        raise HTTPException(status_code=404, detail="Hospital not found")
    return hospitals[index]


@app.get("/hospitals/draft")
async def get_draft():
    """Return an empty draft with the form's default values."""
    return new_draft()


@app.post("/hospitals/validate")
async def validate_hospital(payload: Any = Body(...)):
    """Validate a draft without storing it.

    Returns:
        ``{"valid": true}`` or a 422 response with every violation keyed by field path.
    """
    result = validate(payload)
    if isinstance(result, Err):
        return _violations_response(result)
    return {"valid": True}


@app.post("/hospitals", status_code=201, response_model=HospitalWriteResult)
async def create_hospital(payload: Any = Body(...)):
    """Validate a draft and append it to the list.

    Args:
        payload: Draft record keyed by camelCase field names.

    Returns:
        The new record's index and its normalized data, or a 422 response
        carrying the violations mapping. The list is untouched on failure.

    Raises:
        HTTPException(400) if the list already holds MAX_HOSPITALS records.
    """
    if len(hospitals) >= MAX_HOSPITALS:
        raise HTTPException(status_code=400, detail=f"Hospital list is full ({MAX_HOSPITALS})")

    result = validate(payload)
    if isinstance(result, Err):
        return _violations_response(result)

    hospitals.append(result.record)
    index = len(hospitals) - 1
    logger.info("hospital %d created: %s", index, result.record.name)
    return {"index": index, "hospital": _dump(result.record)}


@app.get("/hospitals", response_model=List[HospitalSummary])
async def list_hospitals():
    return [
        HospitalSummary(
            index=i,
            name=h.name,
            telephone=h.telephone,
            url=h.url,
            address=_one_line_address(h),
        )
        for i, h in enumerate(hospitals)
    ]


@app.get("/hospitals/{index}")
async def get_hospital(index: int):
    """Return the stored record at ``index``, e.g. to load it into the edit form."""
    return _dump(_lookup(index))


@app.put("/hospitals/{index}", response_model=HospitalWriteResult)
async def update_hospital(index: int, payload: Any = Body(...)):
    """Validate a draft and substitute it for the record at ``index``.

    Raises:
        HTTPException(404) if the index is unknown.
    """
    _lookup(index)
    result = validate(payload)
    if isinstance(result, Err):
        return _violations_response(result)

    hospitals[index] = result.record
    logger.info("hospital %d updated: %s", index, result.record.name)
    return {"index": index, "hospital": _dump(result.record)}


@app.delete("/hospitals/{index}", status_code=204)
async def delete_hospital(index: int):
    """Remove the record at ``index``. Later records shift down by one."""
    removed = _lookup(index)
    del hospitals[index]
    logger.info("hospital %d deleted: %s", index, removed.name)
    return Response(status_code=204)


@app.get("/hospitals/{index}/jsonld")
async def get_hospital_jsonld(index: int):
    """Return the schema.org JSON-LD document for the record at ``index``."""
    return JSONResponse(content=to_document(_lookup(index)), media_type="application/ld+json")


@app.get("/hospitals/{index}/jsonld/script", response_class=HTMLResponse)
async def get_hospital_jsonld_script(index: int):
    """Return the JSON-LD wrapped in a ``<script>`` element for embedding."""
    return HTMLResponse(content=to_script_tag(_lookup(index), indent=JSONLD_INDENT))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("hospital_editor.main:app", host="127.0.0.1", port=8000, reload=True)
