'''Tally ballots for a first-past-the-post contest.

The main entry point is :func:`tally`, which counts a sequence of
:class:`votetally.contest.Ballot` objects against a
:class:`votetally.contest.Contest` and returns a :class:`Result`.

Ballots that do not count are ignored rather than treated as errors:

-   ballots cast in a different contest (their contest identifier does not
    match),
-   ballots for a choice identifier that the contest does not declare.

Neither of these contributes to the total of votes.

The winner is the choice with the highest count. Ties go to the choice
declared first in the contest. By default, this rule applies even when no
votes were counted at all, so a contest with choices always has a winner;
pass ``require_votes=True`` to get no winner in that case instead.

Counting is a sum, so it can be split into shards of ballots counted
separately by :func:`count_votes` and merged afterwards; :func:`tally_shards`
does this. The winner is always determined from the merged counts.
'''

from __future__ import annotations

import dataclasses
import functools
import logging
from typing import Dict, Iterable, Optional, Tuple

import votetally.util
from votetally.contest import Ballot, Choice, Contest

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class TallyEntry:
    '''Number of votes counted for a single choice.'''
    choice_id: int
    total_count: int


@dataclasses.dataclass(frozen=True)
class Result:
    '''The outcome of a tallied contest.

    :param contest_id: Identifier of the tallied contest.
    :param total_votes: Number of ballots counted in the contest.
    :param results: Vote counts, one entry per declared choice in declaration
        order. Choices declared with a duplicate identifier get one entry
        each, all with the same count.
    :param winner: The winning choice, or None if there is none.
    '''
    contest_id: int
    total_votes: int
    results: Tuple[TallyEntry, ...] = ()
    winner: Optional[Choice] = None

    def __post_init__(self):
        object.__setattr__(self, 'results', tuple(self.results))

    def counts(self) -> Dict[int, int]:
        '''Return the vote counts keyed by distinct choice identifier.'''
        return {entry.choice_id: entry.total_count for entry in self.results}

    def vote_sum(self) -> int:
        '''Sum the counts over distinct choices; equals total_votes.'''
        return sum(self.counts().values())


def count_votes(contest: Contest,
                ballots: Iterable[Ballot],
                ) -> Dict[int, int]:
    '''Count the ballots valid in the contest by choice identifier.

    :param contest: The contest to count ballots for.
    :param ballots: Ballots to count. Ballots for other contests or undeclared
        choices are skipped.
    :returns: A dictionary mapping every distinct declared choice identifier
        (including those with no votes) to the number of ballots cast for it,
        in order of declaration.
    '''
    counts = dict.fromkeys(contest.choice_ids(), 0)
    for ballot in ballots:
        if ballot.contest_id != contest.id:
            logger.debug('skipping ballot for contest %d', ballot.contest_id)
        elif ballot.choice_id not in counts:
            logger.debug('skipping ballot for undeclared choice %d',
                         ballot.choice_id)
        else:
            counts[ballot.choice_id] += 1
    return counts


def select_winner(contest: Contest,
                  results: Iterable[TallyEntry],
                  require_votes: bool = False,
                  ) -> Optional[Choice]:
    '''Determine the plurality winner from finished vote counts.

    The entries are scanned in order and the leader is only replaced by an
    entry with a strictly greater count, so the first of several tied choices
    wins.

    :param contest: The contest whose choices are referenced by the entries.
    :param results: Final vote counts in declaration order.
    :param require_votes: If True, return None when the leading choice
        received no votes.
    :returns: The first declared choice with the leading identifier, or None
        if there are no entries.
    '''
    leader = None
    for entry in results:
        if leader is None or entry.total_count > leader.total_count:
            leader = entry
    if leader is None:
        return None
    if require_votes and leader.total_count == 0:
        logger.info('no votes counted, no winner')
        return None
    return contest.get_choice(leader.choice_id)


def tally(contest: Contest,
          ballots: Iterable[Ballot],
          require_votes: bool = False,
          ) -> Result:
    '''Tally ballots in a plurality (first-past-the-post) contest.

    :param contest: The contest to tally.
    :param ballots: Cast ballots, possibly including ballots that do not
        count in the contest (these are ignored).
    :param require_votes: If True, a contest with no counted votes has no
        winner. Otherwise the first declared choice wins it.
    '''
    return _make_result(contest, count_votes(contest, ballots), require_votes)


def tally_shards(contest: Contest,
                 shards: Iterable[Iterable[Ballot]],
                 require_votes: bool = False,
                 ) -> Result:
    '''Tally ballots split into shards that are counted separately.

    Gives the same result as :func:`tally` over all shards concatenated.
    '''
    counts = functools.reduce(
        votetally.util.sum_dicts,
        (count_votes(contest, shard) for shard in shards),
        dict.fromkeys(contest.choice_ids(), 0),
    )
    return _make_result(contest, counts, require_votes)


def _make_result(contest: Contest,
                 counts: Dict[int, int],
                 require_votes: bool,
                 ) -> Result:
    total_votes = sum(counts.values())
    results = tuple(
        TallyEntry(choice.id, counts[choice.id]) for choice in contest.choices
    )
    logger.info('counted %d votes for %d choices in contest %d',
                total_votes, len(counts), contest.id)
    winner = select_winner(contest, results, require_votes=require_votes)
    if winner is not None:
        logger.info('%s wins contest %d', winner.text, contest.id)
    return Result(
        contest_id=contest.id,
        total_votes=total_votes,
        results=results,
        winner=winner,
    )
