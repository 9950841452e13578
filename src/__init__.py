"""
Look up places with the OpenStreetMap Nominatim service.

    from geogetter import get_location
    for location in get_location('Lębork'):
        print(location.display_name)
"""
from geogetter.config import Config
from geogetter.nominatim import get_location
from geogetter.records import Address, GeocodingError, Location
from geogetter.url_encoder import EncodingError, LookupMiss, SourceUnavailable, encode, encode_str

__all__ = [
    'Address',
    'Config',
    'EncodingError',
    'GeocodingError',
    'Location',
    'LookupMiss',
    'SourceUnavailable',
    'encode',
    'encode_str',
    'get_location',
]
