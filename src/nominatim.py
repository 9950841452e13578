import json
import logging
import requests
from typing import Any, Optional

from geogetter.config import Config
from geogetter.records import GeocodingError, Location
from geogetter.url_encoder import EncodingTable, default_table, encode, load_table

logger: logging.Logger = logging.getLogger(__name__)

def config_table(config: Config) -> EncodingTable:
    """The encoding table selected by the configuration."""
    if config.table_path is None:
        return default_table()
    return load_table(config.table_path)

def search_url(input_str: str, config: Config, table: Optional[EncodingTable] = None) -> str:
    """
    Build the search URL for a free-form query.
    Alphanumeric characters are left as they are, the rest is escaped using the table.
    """
    if table is None:
        table = config_table(config)
    query = encode(input_str, True, table)
    return f'{config.endpoint}?addressdetails=1&q={query}&format=jsonv2&limit={config.limit}'

def parse_locations(text: str) -> list[Location]:
    try:
        values: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise GeocodingError(f'invalid JSON in response: {e}') from e
    if not isinstance(values, list):
        raise GeocodingError(f'expected a list of locations, got {type(values).__name__}')
    return [Location.from_json(v) for v in values]

def get_location(
    input_str: str,
    session: Optional[requests.Session] = None,
    config: Optional[Config] = None,
    table: Optional[EncodingTable] = None,
) -> list[Location]:
    """
    Look up a place by name or address.

    Arguments:
    * input_str: the free-form query, such as '1600 Amphitheatre Parkway, Mountain View, CA'.
    * session: HTTP session to reuse; a fresh one is made otherwise.
    * config: service settings, defaults if not given.
    * table: encoding table for the query, otherwise chosen by the configuration.

    Only locations that have both a name and a display name are returned.
    Raises EncodingError if the query cannot be encoded, GeocodingError on malformed responses
    and requests exceptions on transport or HTTP errors.
    """
    if config is None:
        config = Config()
    if session is None:
        session = requests.Session()

    url = search_url(input_str, config, table)
    logger.debug(f'Requesting {url}.')
    response = session.get(url, headers = {'User-Agent': config.user_agent}, timeout = config.timeout)
    response.raise_for_status()

    locations = parse_locations(response.text)
    logger.info(f'Received {len(locations)} locations.')
    found = [l for l in locations if l.name is not None and l.display_name is not None]
    if len(found) < len(locations):
        logger.debug(f'Dropped {len(locations) - len(found)} locations without name.')
    return found
