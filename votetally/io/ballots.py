"""Read and write ballot files.

Ballot files are in the JSON lines format: each line holds one ballot as
a JSON object with the identifiers of the contest and the chosen choice::

    {"contest_id": 1, "choice_id": 2}
    {"contest_id": 1, "choice_id": 1}

Blank lines are skipped, so an empty file holds no ballots. The order of
ballots in the file is preserved.
"""

import json
from typing import Iterable, Tuple

import votetally.io.core
from votetally.contest import Ballot


class BallotParseError(votetally.io.core.ParseError):
    pass


def dump_lines(ballots: Iterable[Ballot]) -> Iterable[str]:
    for ballot in ballots:
        yield json.dumps({
            'contest_id': ballot.contest_id,
            'choice_id': ballot.choice_id,
        })


dump, dumps = votetally.io.core.dumpers(dump_lines)


def load_lines(lines: Iterable[str]) -> Tuple[Ballot, ...]:
    return tuple(iter_ballots(lines))


load, loads = votetally.io.core.loaders(load_lines)


def iter_ballots(lines: Iterable[str]) -> Iterable[Ballot]:
    """Parse ballots lazily, one per non-blank line."""
    lines = votetally.io.core.decoded_lines(lines, BallotParseError)
    for line_no, line in enumerate(lines, start=1):
        if line.strip():
            yield _parse_line(line, line_no)


def _parse_line(line: str, line_no: int) -> Ballot:
    where = f'ballot on line {line_no}'
    document = votetally.io.core.parse_document(line, BallotParseError, where)
    return Ballot(
        contest_id=votetally.io.core.get_int(
            document, 'contest_id', BallotParseError, where
        ),
        choice_id=votetally.io.core.get_int(
            document, 'choice_id', BallotParseError, where
        ),
    )
