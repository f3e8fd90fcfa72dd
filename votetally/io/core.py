"""Shared functionality for contest/ballot/result file I/O. Internal."""

from __future__ import annotations

import json
import typing
from typing import Any, Dict, Tuple, Callable, Iterable, Iterator, TextIO

MAX_ID: int = 2 ** 32 - 1
'''Largest contest or choice identifier accepted by the readers.'''


class ParseError(Exception):
    """An input that is invalid according to the given format was detected."""
    pass


def loaders(line_loader: Callable[..., Any]
            ) -> Tuple[Callable[..., Any], Callable[..., Any]]:
    """Create load() and loads() functions from a line parsing function.

    The returned load() reads an open text file, loads() a string; both feed
    it line by line to line_loader.
    """
    return_annot = typing.get_type_hints(line_loader).get('return')
    if return_annot is None:
        return_annot = Any

    def load(file: TextIO, **kwargs) -> return_annot:
        return line_loader(file, **kwargs)

    def loads(text: str, **kwargs) -> return_annot:
        return line_loader(iter(text.split('\n')), **kwargs)

    return load, loads


def dumpers(line_dumper: Callable[..., Iterable[str]]
            ) -> Tuple[Callable[..., None], Callable[..., str]]:
    """Create dump() and dumps() functions from a line generator function.

    Every line of the JSON output is terminated by a newline.
    """

    def dump(file: TextIO, *args, **kwargs) -> None:
        for line in line_dumper(*args, **kwargs):
            file.write(line if line.endswith('\n') else line + '\n')

    def dumps(*args, **kwargs) -> str:
        return ''.join(
            line if line.endswith('\n') else line + '\n'
            for line in line_dumper(*args, **kwargs)
        )

    return dump, dumps


def decoded_lines(lines: Iterable[str],
                  error_class: type = ParseError,
                  ) -> Iterator[str]:
    """Pass lines through, turning undecodable file content into a ParseError."""
    line_iter = iter(lines)
    while True:
        try:
            line = next(line_iter)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise error_class(f'invalid text encoding: {e}') from e
        yield line


def parse_document(text: str,
                   error_class: type = ParseError,
                   where: str = 'document',
                   ) -> Dict[str, Any]:
    """Parse a JSON text that must contain an object."""
    try:
        document = json.loads(text)
    except ValueError as e:
        # also covers integers too long to convert, not only JSONDecodeError
        raise error_class(f'malformed JSON in {where}: {e}') from e
    if not isinstance(document, dict):
        raise error_class(
            f'{where} must be a JSON object, got {type(document).__name__}'
        )
    return document


def get_int(document: Dict[str, Any],
            key: str,
            error_class: type = ParseError,
            where: str = 'document',
            ) -> int:
    """Return a required non-negative integer field of a JSON object."""
    value = _get_field(document, key, error_class, where)
    # bool is a subclass of int but never an identifier
    if isinstance(value, bool) or not isinstance(value, int):
        raise error_class(
            f'field {key!r} in {where} must be an integer, got {value!r}'
        )
    if value < 0:
        raise error_class(
            f'field {key!r} in {where} must not be negative, got {value}'
        )
    if value > MAX_ID:
        raise error_class(
            f'field {key!r} in {where} must be at most {MAX_ID}, got {value}'
        )
    return value


def get_str(document: Dict[str, Any],
            key: str,
            error_class: type = ParseError,
            where: str = 'document',
            ) -> str:
    """Return a required string field of a JSON object."""
    value = _get_field(document, key, error_class, where)
    if not isinstance(value, str):
        raise error_class(
            f'field {key!r} in {where} must be a string, got {value!r}'
        )
    return value


def get_list(document: Dict[str, Any],
             key: str,
             error_class: type = ParseError,
             where: str = 'document',
             ) -> list:
    """Return a required array field of a JSON object."""
    value = _get_field(document, key, error_class, where)
    if not isinstance(value, list):
        raise error_class(
            f'field {key!r} in {where} must be an array, got {value!r}'
        )
    return value


def _get_field(document: Dict[str, Any],
               key: str,
               error_class: type,
               where: str,
               ) -> Any:
    try:
        return document[key]
    except KeyError as e:
        raise error_class(f'missing field {key!r} in {where}') from e
