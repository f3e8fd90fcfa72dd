"""Votetally - a tally counter for first-past-the-post elections.

A single-winner plurality election is tallied in three steps:

-   The contest definition (its choices) and the cast ballots are loaded and
    validated by the readers in the ``io`` subpackage. Malformed input is
    rejected before anything is counted.
-   The ballots are counted against the contest by :func:`tally.tally`.
    Ballots for another contest or for an undeclared choice are ignored.
-   The winner is the choice with the most votes; ties go to the choice
    declared first. The :class:`tally.Result` can be written back out
    by :mod:`io.result`.

The ``votetally`` command-line tool (``python -m votetally``) chains these
steps over files.
"""
