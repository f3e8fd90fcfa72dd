"""Write tally results.

The result is written as a single JSON document, indented by two spaces::

    {
      "contest_id": 1,
      "total_votes": 4,
      "results": [
        {
          "choice_id": 1,
          "total_count": 2
        },
        ...
      ],
      "winner": {
        "choice_id": 1,
        "text": "Rust"
      }
    }

The winner is null if there is none.
"""

import json
from typing import Any, Dict, Iterable

import votetally.io.core
from votetally.tally import Result


def to_dict(result: Result) -> Dict[str, Any]:
    """Convert the result to a JSON-ready dictionary."""
    if result.winner is None:
        winner = None
    else:
        winner = {'choice_id': result.winner.id, 'text': result.winner.text}
    return {
        'contest_id': result.contest_id,
        'total_votes': result.total_votes,
        'results': [
            {'choice_id': entry.choice_id, 'total_count': entry.total_count}
            for entry in result.results
        ],
        'winner': winner,
    }


def dump_lines(result: Result, indent: int = 2) -> Iterable[str]:
    yield from json.dumps(to_dict(result), indent=indent).split('\n')


dump, dumps = votetally.io.core.dumpers(dump_lines)
