from dataclasses import asdict, dataclass, field, fields
from typing import Any, Optional

class GeocodingError(Exception):
    '''The geocoding service returned something we cannot make sense of.'''

def optional_str(values: dict[str, Any], key: str) -> Optional[str]:
    value = values.get(key)
    return None if value is None else str(value)

def required(values: dict[str, Any], key: str, kind: str) -> Any:
    value = values.get(key)
    if value is None:
        raise GeocodingError(f'{kind} without field {key!r}')
    return value

@dataclass(frozen = True)
class Address:
    administrative: Optional[str] = None
    town: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None

    @classmethod
    def from_json(cls, values: dict[str, Any]) -> 'Address':
        """Unknown keys are ignored."""
        if not isinstance(values, dict):
            raise GeocodingError(f'address is not an object: {values!r}')
        return cls(**{f.name: optional_str(values, f.name) for f in fields(cls)})

@dataclass(frozen = True)
class Location:
    lat: str
    lon: str
    address: Address
    boundingbox: list[str] = field(default_factory = list)
    addresstype: Optional[str] = None
    name: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def from_json(cls, values: dict[str, Any]) -> 'Location':
        """
        Build a location from one entry of a search response.
        The fields lat, lon, address and boundingbox are required.
        """
        if not isinstance(values, dict):
            raise GeocodingError(f'location is not an object: {values!r}')
        boundingbox = required(values, 'boundingbox', 'location')
        if not isinstance(boundingbox, list):
            raise GeocodingError(f'bounding box is not a list: {boundingbox!r}')
        return cls(
            lat = str(required(values, 'lat', 'location')),
            lon = str(required(values, 'lon', 'location')),
            address = Address.from_json(required(values, 'address', 'location')),
            boundingbox = [str(x) for x in boundingbox],
            addresstype = optional_str(values, 'addresstype'),
            name = optional_str(values, 'name'),
            display_name = optional_str(values, 'display_name'),
        )

    @property
    def latitude(self) -> float:
        return float(self.lat)

    @property
    def longitude(self) -> float:
        return float(self.lon)

    def to_json(self) -> dict[str, Any]:
        return asdict(self)
