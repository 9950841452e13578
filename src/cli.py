import argparse
import configparser
from dataclasses import replace
import json
import logging
from pathlib import Path
import requests
import sys
from typing import NoReturn, Optional

from geogetter.config import Config
from geogetter.nominatim import config_table, get_location
from geogetter.records import GeocodingError, Location
from geogetter.url_encoder import EncodingError, encode

logger: logging.Logger = logging.getLogger('geogetter')

def describe(location: Location) -> str:
    return '\n'.join([
        f'Name: {location.name}',
        f'Address: {location.display_name}',
        f'Coordinates: {location.lat}, {location.lon}',
    ])

def run(
    query: str,
    config: Config,
    encode_only: bool = False,
    skip_alphanumeric: bool = True,
    as_json: bool = False,
    session: Optional[requests.Session] = None,
) -> bool:
    """
    Encode or look up the query and print the result on stdout.
    Return false (and log an error message) if nothing could be printed.
    """
    try:
        table = config_table(config)
        if encode_only:
            print(encode(query, skip_alphanumeric, table))
            return True
        locations = get_location(query, session = session, config = config, table = table)
    except EncodingError as e:
        logger.error(f'Cannot encode query: {e}')
        return False
    except (GeocodingError, requests.RequestException) as e:
        logger.error(f'Geocoding failed: {e}')
        return False

    if not locations:
        logger.error('No location found for the input.')
        return False

    if as_json:
        print(json.dumps([l.to_json() for l in locations], indent = 2, ensure_ascii = False))
    else:
        print('\n\n'.join(map(describe, locations)))
    return True

# Command-line interface.
def cli(argv: Optional[list[str]] = None) -> NoReturn:
    parser = argparse.ArgumentParser(
        description = 'Look up places with the OpenStreetMap Nominatim service.',
        add_help = False,
    )
    parser.add_argument('query', nargs = '+', metavar = 'QUERY', help = '''
Place name or address to look up.
Several arguments are joined by spaces.
''')
    parser.add_argument('--config', type = Path, metavar = 'FILE', help = '''
INI file with a [geogetter] section.
Recognized keys: endpoint, user_agent, limit, timeout, table_path.
''')
    parser.add_argument('--table', type = Path, metavar = 'FILE', help = '''
Encoding table with one token per line.
Overrides table_path from the configuration file.
Defaults to the table shipped with the package.
''')
    parser.add_argument('--encode-only', action = 'store_true', help = 'Print the encoded query instead of looking it up.')
    parser.add_argument('--no-skip-alphanumeric', action = 'store_true', help = '''
Escape alphanumeric characters too.
Only used with --encode-only.
''')
    parser.add_argument('--json', action = 'store_true', help = 'Print locations as JSON.')

    g = parser.add_argument_group(title = 'help and debugging')
    g.add_argument('-h', '--help', action = 'help', help = 'Show this help message and exit.')
    g.add_argument('-v', '--verbose', action = 'count', default = 0, help = '''
Print informational (specify once) or debug (specify twice) messages on stderr.
''')

    # Parse arguments.
    args = parser.parse_args(argv)

    # Configure logging.
    logging.basicConfig()
    logger.setLevel({
        0: logging.WARNING,
        1: logging.INFO,
    }.get(args.verbose, logging.DEBUG))

    try:
        config = Config() if args.config is None else Config.load(args.config)
    except (OSError, ValueError, configparser.Error) as e:
        logger.error(f'Cannot read configuration: {e}')
        sys.exit(1)
    if args.table is not None:
        config = replace(config, table_path = args.table)
    logger.debug(f'Configuration: {config}')

    if not run(
        ' '.join(args.query),
        config,
        encode_only = args.encode_only,
        skip_alphanumeric = not args.no_skip_alphanumeric,
        as_json = args.json,
    ):
        sys.exit(1)
    sys.exit(0)
