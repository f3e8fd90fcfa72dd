"""A commandline tool to tally a first-past-the-post election.

Reads a contest definition and ballots cast in it, counts the votes and
writes the result with the winner. Ballots for other contests or for
undeclared choices are ignored.
"""

import argparse
import io
import logging
import sys
import warnings
from typing import Optional, List

import votetally.io.ballots
import votetally.io.contest
import votetally.io.result
from votetally.io.core import ParseError
from votetally.tally import Result, tally

logger = logging.getLogger('votetally')

argparser = argparse.ArgumentParser(
    prog='votetally',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-c', '--contest-file',
    default='election.json',
    help='JSON file to load the contest definition from',
)
argparser.add_argument(
    '-b', '--ballot-file',
    default='votes.json',
    help='JSON lines file to load the ballots from',
)
argparser.add_argument(
    '-I', '--use-stdin',
    action='store_true',
    help='load ballots from standard input',
)
argparser.add_argument(
    '-o', '--output-file',
    default='result.json',
    help='JSON file to write the result to',
)
argparser.add_argument(
    '-O', '--use-stdout',
    action='store_true',
    help='write the result to standard output',
)
argparser.add_argument(
    '-z', '--require-votes',
    action='store_true',
    help=(
        'declare no winner if no votes were counted; by default, the first'
        ' declared choice wins a contest with no votes'
    ),
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all log messages including skipped ballots',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any log messages or other info',
)


def main(contest_file: str = 'election.json',
         ballot_file: str = 'votes.json',
         use_stdin: bool = False,
         output_file: str = 'result.json',
         use_stdout: bool = False,
         require_votes: bool = False,
         verbose: bool = False,
         quiet: bool = False,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    with open(contest_file, encoding='utf8') as infile:
        contest = votetally.io.contest.load(infile)
    if not contest.choices:
        warnings.warn(f'contest {contest.id} has no choices, no winner')
    if use_stdin:
        ballots = votetally.io.ballots.load(sys.stdin)
    else:
        with open(ballot_file, encoding='utf8') as infile:
            ballots = votetally.io.ballots.load(infile)
    logger.info('loaded %d ballots', len(ballots))
    result = tally(contest, ballots, require_votes=require_votes)
    if use_stdout:
        write_result(result, sys.stdout)
    else:
        # opened only now so that invalid input leaves no output file
        with open(output_file, 'w', encoding='utf8') as outfile:
            write_result(result, outfile)
        if not quiet:
            print(f'Tallying completed. Results written to {output_file}.')


def write_result(result: Result, outfile: io.TextIOBase) -> None:
    votetally.io.result.dump(outfile, result)


def run(argv: Optional[List[str]] = None) -> int:
    """Run the tool with the given arguments; return the exit status."""
    args = argparser.parse_args(argv)
    try:
        main(**vars(args))
    except (ParseError, OSError) as e:
        logger.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(run())
