'''Contest definitions and ballots.

A contest (:class:`Contest`) is the election being tallied, with an ordered
list of choices (:class:`Choice`) that ballots (:class:`Ballot`) can be cast
for. All of these are immutable value objects; they are created by the readers
in :mod:`votetally.io` or directly.

The declaration order of choices matters: it is the order in which the tally
results are reported and it breaks ties for the winner. Duplicate choice
identifiers are permitted; ballots for such an identifier are counted once,
under a single shared total.
'''

from __future__ import annotations

import dataclasses
from typing import Tuple, Optional


class ContestError(KeyError):
    '''A choice was looked up that the contest does not declare.

    :param contest_id: Identifier of the contest searched.
    :param choice_id: Identifier of the choice that was not found.
    '''
    def __init__(self, contest_id: int, choice_id: int):
        self.contest_id = contest_id
        self.choice_id = choice_id
        super().__init__(
            f'choice {choice_id} not declared in contest {contest_id}'
        )

    def __str__(self) -> str:
        return self.args[0]


@dataclasses.dataclass(frozen=True)
class Choice:
    '''One option that can be voted for in a contest.

    :param id: Identifier of the choice, referenced by ballots.
    :param text: Label of the choice for display.
    '''
    id: int
    text: str


@dataclasses.dataclass(frozen=True)
class Contest:
    '''A single-winner election.

    :param id: Identifier of the contest, referenced by ballots.
    :param description: Free text describing the contest. It does not take
        part in the tally.
    :param choices: Choices available in the contest, in declaration order.
    '''
    id: int
    description: str
    choices: Tuple[Choice, ...] = ()

    def __post_init__(self):
        # accept any iterable but store a tuple to stay immutable
        object.__setattr__(self, 'choices', tuple(self.choices))

    def choice_ids(self) -> Tuple[int, ...]:
        '''Return distinct choice identifiers in order of first declaration.'''
        return tuple(dict.fromkeys(choice.id for choice in self.choices))

    def get_choice(self, choice_id: int) -> Choice:
        '''Return the first declared choice with the given identifier.

        :raises ContestError: If no such choice is declared.
        '''
        found = self.find_choice(choice_id)
        if found is None:
            raise ContestError(self.id, choice_id)
        return found

    def find_choice(self, choice_id: int) -> Optional[Choice]:
        for choice in self.choices:
            if choice.id == choice_id:
                return choice
        return None


@dataclasses.dataclass(frozen=True)
class Ballot:
    '''A single vote cast for one choice in one contest.'''
    contest_id: int
    choice_id: int

    def is_for(self, contest: Contest) -> bool:
        '''Whether the ballot counts in the given contest.

        True if it references the contest and one of its declared choices.
        '''
        return (
            self.contest_id == contest.id
            and contest.find_choice(self.choice_id) is not None
        )
