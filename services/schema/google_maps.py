# services/schema/google_maps.py
from typing import List, Optional

from pydantic import StrictStr

from services.schema.common import Number, RawModel


class LatLng(RawModel):
    lat: Optional[Number] = None
    lng: Optional[Number] = None


class Geometry(RawModel):
    location: Optional[LatLng] = None


class GeocodeResult(RawModel):
    formatted_address: Optional[StrictStr] = None
    place_id: Optional[StrictStr] = None
    geometry: Optional[Geometry] = None


class GeocodeResponse(RawModel):
    status: Optional[StrictStr] = None
    error_message: Optional[StrictStr] = None
    results: Optional[List[GeocodeResult]] = None


class TextValue(RawModel):
    text: Optional[StrictStr] = None
    value: Optional[Number] = None


class DistanceElement(RawModel):
    status: Optional[StrictStr] = None
    distance: Optional[TextValue] = None
    duration: Optional[TextValue] = None


class DistanceRow(RawModel):
    elements: Optional[List[DistanceElement]] = None


class DistanceMatrixResponse(RawModel):
    status: Optional[StrictStr] = None
    error_message: Optional[StrictStr] = None
    origin_addresses: Optional[List[StrictStr]] = None
    destination_addresses: Optional[List[StrictStr]] = None
    rows: Optional[List[DistanceRow]] = None
