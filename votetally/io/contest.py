"""Read and write contest definition files.

A contest file is a single JSON document::

    {
      "id": 1,
      "description": "Favourite language",
      "choices": [
        {"id": 1, "text": "Rust"},
        {"id": 2, "text": "Python"}
      ]
    }

All the fields shown are required; other fields are ignored.
"""

import json
from typing import Iterable

import votetally.io.core
from votetally.contest import Choice, Contest


class ContestParseError(votetally.io.core.ParseError):
    pass


def dump_lines(contest: Contest, indent: int = 2) -> Iterable[str]:
    document = {
        'id': contest.id,
        'description': contest.description,
        'choices': [
            {'id': choice.id, 'text': choice.text}
            for choice in contest.choices
        ],
    }
    yield from json.dumps(document, indent=indent).split('\n')


dump, dumps = votetally.io.core.dumpers(dump_lines)


def load_lines(lines: Iterable[str]) -> Contest:
    text = '\n'.join(
        line.rstrip('\n')
        for line in votetally.io.core.decoded_lines(lines, ContestParseError)
    )
    if not text.strip():
        raise ContestParseError('empty contest file')
    document = votetally.io.core.parse_document(
        text, ContestParseError, 'contest'
    )
    return Contest(
        id=votetally.io.core.get_int(
            document, 'id', ContestParseError, 'contest'
        ),
        description=votetally.io.core.get_str(
            document, 'description', ContestParseError, 'contest'
        ),
        choices=[
            _parse_choice(choice_def, i)
            for i, choice_def in enumerate(votetally.io.core.get_list(
                document, 'choices', ContestParseError, 'contest'
            ))
        ],
    )


load, loads = votetally.io.core.loaders(load_lines)


def _parse_choice(choice_def: object, index: int) -> Choice:
    where = f'choice #{index + 1}'
    if not isinstance(choice_def, dict):
        raise ContestParseError(f'{where} must be a JSON object')
    return Choice(
        id=votetally.io.core.get_int(
            choice_def, 'id', ContestParseError, where
        ),
        text=votetally.io.core.get_str(
            choice_def, 'text', ContestParseError, where
        ),
    )
