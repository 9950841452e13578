import configparser
from dataclasses import dataclass, replace
import logging
from pathlib import Path
from typing import Optional, Union

logger: logging.Logger = logging.getLogger(__name__)

SECTION = 'geogetter'

@dataclass(frozen = True)
class Config:
    endpoint: str = 'https://nominatim.openstreetmap.org/search'
    user_agent: str = 'geogetter Python library'
    limit: int = 1
    timeout: float = 10.0
    table_path: Optional[Path] = None

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'Config':
        """
        Read settings from the [geogetter] section of an INI file.
        Keys that are not given keep their defaults.
        A relative table_path is taken relative to the file.
        """
        path = Path(path)
        logger.debug(f'Reading configuration from {path}.')
        parser = configparser.ConfigParser()
        with path.open(encoding = 'utf8') as f:
            parser.read_file(f)

        config = cls()
        if not parser.has_section(SECTION):
            logger.warning(f'No [{SECTION}] section in {path}, using defaults.')
            return config

        s = parser[SECTION]
        changes = {}
        if 'endpoint' in s:
            changes['endpoint'] = s['endpoint']
        if 'user_agent' in s:
            changes['user_agent'] = s['user_agent']
        if 'limit' in s:
            changes['limit'] = s.getint('limit')
        if 'timeout' in s:
            changes['timeout'] = s.getfloat('timeout')
        if 'table_path' in s:
            changes['table_path'] = path.parent / s['table_path']
        return replace(config, **changes)
