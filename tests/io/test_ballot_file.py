import sys
import os
import io

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import votetally.io.ballots
from votetally.contest import Ballot

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def test_load_file():
    with open(os.path.join(DATA_DIR, 'languages_votes.jsonl'), encoding='utf8') as infile:
        ballots = votetally.io.ballots.load(infile)
    assert len(ballots) == 7
    assert ballots[0] == Ballot(1, 1)
    assert ballots[4] == Ballot(99, 2)
    assert ballots[-1] == Ballot(1, 2)


@pytest.mark.parametrize('text', ['', '\n', '\n  \n\t\n'])
def test_empty(text):
    assert votetally.io.ballots.loads(text) == ()


def test_crlf_lines():
    ballots = votetally.io.ballots.load(io.StringIO(
        '{"contest_id": 1, "choice_id": 2}\r\n'
        '{"contest_id": 1, "choice_id": 3}\r\n'
    ))
    assert ballots == (Ballot(1, 2), Ballot(1, 3))


def test_dump():
    assert votetally.io.ballots.dumps([Ballot(1, 2), Ballot(3, 4)]) == (
        '{"contest_id": 1, "choice_id": 2}\n'
        '{"contest_id": 3, "choice_id": 4}\n'
    )


@pytest.mark.parametrize(('text', 'line_no'), [
    ('{"contest_id": 1}', 1),
    ('{"contest_id": 1, "choice_id": 1}\n{"choice_id": 1}', 2),
    ('{"contest_id": 1, "choice_id": 1}\n\nnot json', 3),
    ('{"contest_id": 1, "choice_id": "1"}', 1),
    ('{"contest_id": 1, "choice_id": false}', 1),
    ('{"contest_id": -2, "choice_id": 1}', 1),
    ('[1, 1]', 1),
    ('{"contest_id": 1, "choice_id": 1} {"contest_id": 1, "choice_id": 1}', 1),
    ('{"contest_id": 1, "choice_id": ' + '9' * 5000 + '}', 1),
    ('{"contest_id": 1, "choice_id": 1}\n{"contest_id": 4294967296, "choice_id": 1}', 2),
])
def test_invalid(text, line_no):
    with pytest.raises(votetally.io.ballots.BallotParseError) as excinfo:
        votetally.io.ballots.loads(text)
    assert f'line {line_no}' in str(excinfo.value)


def test_iter_ballots_lazy():
    lines = iter([
        '{"contest_id": 1, "choice_id": 1}',
        'garbage',
    ])
    ballot_iter = votetally.io.ballots.iter_ballots(lines)
    assert next(ballot_iter) == Ballot(1, 1)
    with pytest.raises(votetally.io.ballots.BallotParseError):
        next(ballot_iter)


def test_largest_id():
    assert votetally.io.ballots.loads(
        '{"contest_id": 4294967295, "choice_id": 0}'
    ) == (Ballot(4294967295, 0), )


def test_invalid_encoding():
    infile = io.TextIOWrapper(
        io.BytesIO(b'{"contest_id": 1, "choice_id": 1}\n\xff\xfe\n'),
        encoding='utf8',
    )
    with pytest.raises(votetally.io.ballots.BallotParseError) as excinfo:
        votetally.io.ballots.load(infile)
    assert 'encoding' in str(excinfo.value)
