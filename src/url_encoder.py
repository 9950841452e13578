from collections.abc import Iterable
import functools
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

logger: logging.Logger = logging.getLogger(__name__)

EncodingTable = Mapping[str, str]
EncodingTable.__doc__ = """Maps single characters to their escape codes, such as ' ' to '%20'."""

SPACE_TOKEN = 'space'
DEFAULT_BASE = 32
MAX_CODE = 0xFF

# Printable ASCII, one token per line.
DEFAULT_TABLE_PATH: Path = Path(__file__).parent / 'map.txt'

# Errors.

class EncodingError(Exception):
    pass

class SourceUnavailable(EncodingError):
    def __init__(self, path: Path):
        super().__init__(f'cannot read encoding table {path}')
        self.path = path

class LookupMiss(EncodingError, KeyError):
    def __init__(self, char: str, position: int):
        super().__init__(char, position)
        self.char = char
        self.position = position

    def __str__(self) -> str:
        return f'no escape code for {self.char!r} at position {self.position}'

class DuplicateToken(EncodingError, ValueError):
    def __init__(self, key: str, first_line: int, second_line: int):
        super().__init__(f'token {key!r} on line {second_line} already given on line {first_line}')
        self.key = key
        self.first_line = first_line
        self.second_line = second_line

class CodeOverflow(EncodingError, ValueError):
    def __init__(self, line: int, code: int):
        super().__init__(f'line {line} would be assigned code {code:X}, past {MAX_CODE:X}')
        self.line = line
        self.code = code

# Table construction.

def split_lines(text: str) -> list[str]:
    """
    Split text at newlines only.
    A carriage return directly before a newline belongs to the line terminator;
    anywhere else it is part of the token, like other line breaking characters.
    """
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines

def token_key(line: str) -> str:
    """
    Turn a source line into a table key.
    The line terminator is dropped, other whitespace is kept.
    """
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return ' ' if line == SPACE_TOKEN else line

def build_table(lines: Iterable[str], base: int = DEFAULT_BASE, strict: bool = False) -> EncodingTable:
    """
    Build an encoding table from an ordered list of tokens.

    The token on line i (counting from 0) is assigned the code base + i.
    A repeated token overwrites the earlier entry, with the code of its later line.
    In strict mode, a repeated token raises DuplicateToken instead.
    """
    table: dict[str, str] = {}
    seen: dict[str, int] = {}
    for (i, line) in enumerate(lines):
        key = token_key(line)
        code = base + i
        if code > MAX_CODE:
            raise CodeOverflow(i + 1, code)
        if key in seen:
            if strict:
                raise DuplicateToken(key, seen[key] + 1, i + 1)
            logger.debug(f'Token {key!r} on line {i + 1} overwrites line {seen[key] + 1}.')
        seen[key] = i
        table[key] = f'%{code:02X}'
    return MappingProxyType(table)

def load_table(path: Union[str, Path], base: int = DEFAULT_BASE, strict: bool = False) -> EncodingTable:
    """Read an encoding table from a file with one token per line."""
    path = Path(path)
    logger.debug(f'Loading encoding table from {path}.')
    try:
        with path.open(encoding = 'utf8', newline = '') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(path) from e
    table = build_table(split_lines(text), base = base, strict = strict)
    logger.debug(f'Loaded {len(table)} escape codes.')
    return table

@functools.lru_cache(maxsize = None)
def default_table() -> EncodingTable:
    return load_table(DEFAULT_TABLE_PATH)

# Encoding.

class UrlEncoder:
    '''Percent encoding of strings driven by an encoding table.'''

    def __init__(self, table: Optional[EncodingTable] = None, *, skip_alphanumeric: bool = True):
        self.table = default_table() if table is None else table
        self.skip_alphanumeric = skip_alphanumeric

    def encode_iterable(self, chars: Iterable[str]) -> Iterable[str]:
        for (i, c) in enumerate(chars):
            if self.skip_alphanumeric and c.isalnum():
                yield c
                continue
            code = self.table.get(c)
            if code is None:
                raise LookupMiss(c, i)
            yield code

    def encode(self, s: str) -> str:
        return ''.join(self.encode_iterable(s))

def encode(s: str, skip_alphanumeric: bool, table: EncodingTable) -> str:
    """
    Percent encode a string character by character.
    If skip_alphanumeric is set, alphanumeric characters are copied as they are.
    Every other character must have an entry in the table, otherwise LookupMiss is raised.
    """
    return UrlEncoder(table, skip_alphanumeric = skip_alphanumeric).encode(s)

def encode_str(s: str, skip_alphanumeric: bool = True) -> str:
    """Percent encode a string using the packaged table."""
    return encode(s, skip_alphanumeric, default_table())
