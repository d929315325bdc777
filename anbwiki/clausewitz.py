"""
Clausewitz Engine Script Parser

Parses Paradox game script files (.txt) into an ordered tree of
(key, operator, value) triples. Keys may repeat, so every object is kept as
an association list rather than a dict; callers pick "first", "last" or
"all" occurrences per field.
"""

import logging
from pathlib import Path
from typing import Any, Iterator, Optional, Union

logger = logging.getLogger(__name__)

COLOUR_TYPES = ('rgb', 'hsv', 'hsv360', 'hex')


class ParseError(ValueError):
    """Raised when script text cannot be turned into a tree."""


class ShapeError(TypeError):
    """Raised when a value is read as a shape it does not have."""


class Block:
    """An object node: ordered (key, op, value) triples with duplicate keys."""

    __slots__ = ('_fields',)

    def __init__(self, fields=None):
        self._fields = list(fields or [])

    def append(self, key: str, op: Optional[str], value: Any):
        self._fields.append((key, op, value))

    def fields(self) -> Iterator[tuple]:
        """Iterate (key, op, value) triples in file order."""
        return iter(self._fields)

    def keys(self) -> list:
        return [key for key, _op, _value in self._fields]

    def first(self, key: str, default: Any = None) -> Any:
        """Value of the first occurrence of key."""
        for k, _op, value in self._fields:
            if k == key:
                return value
        return default

    def last(self, key: str, default: Any = None) -> Any:
        """Value of the last occurrence of key."""
        for k, _op, value in reversed(self._fields):
            if k == key:
                return value
        return default

    def all(self, key: str) -> list:
        """Values of every occurrence of key, in file order."""
        return [value for k, _op, value in self._fields if k == key]

    def __contains__(self, key) -> bool:
        return any(k == key for k, _op, _value in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self):
        return self.fields()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        return f"Block({self._fields!r})"

    def to_python(self) -> dict:
        """Plain dict for JSON output; repeated keys become lists."""
        counts = {}
        for key, _op, _value in self._fields:
            counts[key] = counts.get(key, 0) + 1

        result = {}
        for key, _op, value in self._fields:
            value = _to_python(value)
            if counts[key] > 1:
                result.setdefault(key, []).append(value)
            else:
                result[key] = value
        return result


def _to_python(value: Any) -> Any:
    if isinstance(value, Block):
        return value.to_python()
    if isinstance(value, list):
        return [_to_python(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# Typed readers
# ---------------------------------------------------------------------------

def read_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise ShapeError(f"expected scalar, got {type(value).__name__}")


def read_int(value: Any) -> int:
    text = read_string(value)
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        raise ShapeError(f"expected integer, got {text!r}") from None
    if not number.is_integer():
        raise ShapeError(f"expected integer, got {text!r}")
    return int(number)


def read_float(value: Any) -> float:
    text = read_string(value)
    try:
        return float(text)
    except ValueError:
        raise ShapeError(f"expected number, got {text!r}") from None


def read_bool(value: Any) -> bool:
    text = read_string(value).lower()
    if text == 'yes':
        return True
    if text == 'no':
        return False
    raise ShapeError(f"expected yes/no, got {text!r}")


def read_array(value: Any) -> list:
    if isinstance(value, list):
        return value
    # `{}` is ambiguous between an empty array and an empty object
    if isinstance(value, Block) and len(value) == 0:
        return []
    raise ShapeError(f"expected array, got {type(value).__name__}")


def read_object(value: Any) -> Block:
    if isinstance(value, Block):
        return value
    if isinstance(value, list) and not value:
        return Block()
    raise ShapeError(f"expected object, got {type(value).__name__}")


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class ClausewitzParser:
    """Parser for Clausewitz engine script files."""

    def __init__(self):
        self.pos = 0
        self.text = ""
        self.length = 0

    def parse_file(self, filepath: Union[str, Path]) -> Block:
        """Parse a single file and return its root block."""
        return self.parse_bytes(Path(filepath).read_bytes())

    def parse_bytes(self, data: bytes) -> Block:
        return self.parse(decode(data))

    def parse(self, text: str) -> Block:
        """Parse text content and return the root block."""
        text = self._remove_comments(text)

        self.text = text
        self.length = len(text)
        self.pos = 0

        root = self._parse_block(top_level=True)
        self._skip_whitespace()
        if self.pos < self.length:
            raise ParseError(f"unexpected '{self.text[self.pos]}' at offset {self.pos}")
        return root

    def _remove_comments(self, text: str) -> str:
        """Remove # comments from text."""
        lines = text.split('\n')
        result = []
        for line in lines:
            # Find # not inside quotes
            in_quote = False
            comment_pos = -1
            for i, char in enumerate(line):
                if char == '"':
                    in_quote = not in_quote
                elif char == '#' and not in_quote:
                    comment_pos = i
                    break

            if comment_pos >= 0:
                result.append(line[:comment_pos])
            else:
                result.append(line)

        return '\n'.join(result)

    def _skip_whitespace(self):
        while self.pos < self.length and self.text[self.pos] in ' \t\n\r\ufeff':
            self.pos += 1

    def _peek(self) -> str:
        if self.pos >= self.length:
            return ''
        return self.text[self.pos]

    def _read_operator(self) -> Optional[str]:
        """Consume an operator at the current position, if there is one."""
        self._skip_whitespace()
        two = self.text[self.pos:self.pos + 2]
        if two in ('==', '!=', '<=', '>=', '?='):
            self.pos += 2
            return two
        char = self._peek()
        if char in ('=', '<', '>'):
            self.pos += 1
            return char
        return None

    def _read_token(self) -> str:
        """Read the next token (identifier, number, or quoted string)."""
        self._skip_whitespace()

        if self.pos >= self.length:
            return ''

        if self.text[self.pos] == '"':
            return self._read_quoted_string()

        return self._read_identifier()

    def _read_quoted_string(self) -> str:
        self.pos += 1  # Skip opening quote
        start = self.pos

        while self.pos < self.length:
            char = self.text[self.pos]
            if char == '\\' and self.pos + 1 < self.length:
                self.pos += 2
                continue
            if char == '"':
                result = self.text[start:self.pos]
                self.pos += 1
                return result
            self.pos += 1

        raise ParseError(f"unterminated string starting at offset {start - 1}")

    def _read_identifier(self) -> str:
        start = self.pos

        while self.pos < self.length:
            char = self.text[self.pos]
            if char in ' \t\n\r\ufeff{}=<>!?"':
                break
            self.pos += 1

        if self.pos == start:
            raise ParseError(f"unexpected '{self.text[self.pos]}' at offset {self.pos}")
        return self.text[start:self.pos]

    def _parse_block(self, top_level: bool = False) -> Block:
        """Parse key/value pairs until the closing brace (or end of input)."""
        block = Block()

        while True:
            self._skip_whitespace()

            if self.pos >= self.length:
                if not top_level:
                    raise ParseError("missing closing brace")
                break

            char = self._peek()

            if char == '}':
                if top_level:
                    raise ParseError(f"unbalanced '}}' at offset {self.pos}")
                self.pos += 1
                break

            if char == '{':
                # Anonymous block - nothing can refer to it
                self.pos += 1
                self._parse_block_or_list()
                continue

            key = self._read_token()
            op = self._read_operator()

            if op is not None:
                block.append(key, op, self._parse_value())
            elif self._peek() == '{':
                # Key followed directly by block (no =)
                self.pos += 1
                block.append(key, '=', self._parse_block_or_list())
            else:
                # Key with no value - treat as flag
                block.append(key, None, 'yes')

        return block

    def _parse_value(self) -> Any:
        """Parse a value (block, list, or scalar)."""
        self._skip_whitespace()

        if self._peek() == '{':
            self.pos += 1
            return self._parse_block_or_list()

        token = self._read_token()
        if not token and self.pos >= self.length:
            raise ParseError("missing value at end of input")

        # Colour literals like `rgb { 1 2 3 }`
        self._skip_whitespace()
        if self._peek() == '{' and token in COLOUR_TYPES:
            self.pos += 1
            return self._parse_block_or_list()

        return token

    def _parse_block_or_list(self) -> Any:
        """Parse either a block (key=value pairs) or a list (bare values)."""
        start = self.pos
        is_list = True

        # Look ahead: any operator directly after a token makes this an object
        depth = 0
        while True:
            self._skip_whitespace()
            if self.pos >= self.length:
                raise ParseError(f"missing closing brace for block at offset {start - 1}")
            char = self._peek()
            if char == '{':
                depth += 1
                self.pos += 1
                continue
            if char == '}':
                if depth == 0:
                    break
                depth -= 1
                self.pos += 1
                continue
            self._read_token()
            if self._read_operator() is not None and depth == 0:
                is_list = False
                break

        self.pos = start
        if not is_list:
            return self._parse_block()

        items = []
        while True:
            self._skip_whitespace()
            char = self._peek()
            if char == '}':
                self.pos += 1
                break
            if char == '{':
                self.pos += 1
                items.append(self._parse_block_or_list())
                continue
            items.append(self._read_token())

        if not items:
            return Block()
        return items


def decode(data: bytes) -> str:
    """Decode script bytes: UTF-8 (with or without BOM), else Windows-1252."""
    try:
        return data.decode('utf-8-sig')
    except UnicodeDecodeError:
        return data.decode('cp1252', errors='replace')


def parse(text: str) -> Block:
    """Convenience function to parse text."""
    return ClausewitzParser().parse(text)


def parse_bytes(data: bytes) -> Block:
    return ClausewitzParser().parse_bytes(data)


def parse_file(filepath: Union[str, Path]) -> Block:
    """Convenience function to parse a file."""
    parser = ClausewitzParser()
    return parser.parse_file(filepath)


def parse_all_in_directory(dirpath: Union[str, Path], pattern: str = "*.txt",
                           recursive: bool = False) -> Iterator[tuple]:
    """Parse all matching files in a directory, yielding (path, block).

    Files that cannot be read or parsed are logged and skipped.
    """
    dirpath = Path(dirpath)
    paths = dirpath.rglob(pattern) if recursive else dirpath.glob(pattern)

    for filepath in sorted(paths):
        if not filepath.is_file():
            continue
        try:
            block = parse_file(filepath)
        except (OSError, ParseError) as e:
            logger.warning("Failed to parse %s: %s", filepath, e)
            continue
        yield filepath, block


if __name__ == "__main__":
    import json
    import sys
    if len(sys.argv) > 1:
        result = parse_file(sys.argv[1])
        print(json.dumps(result.to_python(), indent=2, ensure_ascii=False))
