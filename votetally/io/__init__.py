"""Input/output of contests, ballots and tally results.

This subpackage is structured into modules by file format:

-   :mod:`contest` - the contest definition, a single JSON document.
-   :mod:`ballots` - cast ballots, one JSON document per line.
-   :mod:`result` - the tally result, a single JSON document.

The readers validate their input strictly and raise a subclass of
:class:`core.ParseError` on the first problem found.
"""
