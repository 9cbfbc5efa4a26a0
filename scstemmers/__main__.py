"""
Command line interface::

    python -m scstemmers ALGORITHM INPUT OUTPUT [--mode MODE] [-v]

ALGORITHM is a number or a name:

* 1, keselj-sipka-greedy
* 2, keselj-sipka-optimal
* 3, milosevic
* 4, ljubesic-pandzic

INPUT is a text file in UTF-8, the result is written into OUTPUT (in UTF-8 too).
"""

import sys
import logging
import argparse

from scstemmers import files
from scstemmers.stemmer import Algorithm, Stemmer

logger = logging.getLogger('scstemmers')

MODES = {
    'stem': files.stem_file,
    'stem-dual': files.stem_dual_coded_file,
    'encode': files.encode_file,
    'decode': files.decode_file,
}
DUAL_CODING_MODES = ('stem-dual', 'encode', 'decode')


def parse_args(argv=None) -> argparse.Namespace:
    algorithms = ', '.join(f'{a.value} - {a.name.lower().replace("_", "-")}' for a in Algorithm)

    parser = argparse.ArgumentParser(
        prog='scstemmers',
        description='Stemmers for Serbian and Croatian.'
    )
    parser.add_argument('algorithm', help=f'Stemming algorithm: {algorithms}')
    parser.add_argument('input', help='Text file to process (UTF-8)')
    parser.add_argument('output', help='Where to write the result (UTF-8)')
    parser.add_argument(
        '--mode',
        choices=[*MODES, 'tokens'],
        default='stem',
        help="What to do: stem text (default), stem already dual-coded text, convert text to/from "
             "dual coding, or just split it into one token per line"
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug output')

    args = parser.parse_args(argv)

    try:
        args.algorithm = Algorithm.parse(args.algorithm)
    except ValueError as e:
        parser.error(str(e))

    if args.mode in DUAL_CODING_MODES and args.algorithm == Algorithm.LJUBESIC_PANDZIC:
        parser.error(f'--mode {args.mode} is not available for {args.algorithm.name.lower()}: it does not use dual coding')

    return args


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    try:
        if args.mode == 'tokens':
            files.tokens_per_line(args.input, args.output)
        else:
            stemmer = Stemmer.for_algorithm(args.algorithm)
            MODES[args.mode](stemmer, args.input, args.output)
    except (OSError, UnicodeDecodeError) as e:
        logger.error('%s', e)
        return 1

    print('Stemming successfully completed!' if args.mode == 'stem' else 'Done!')
    return 0


if __name__ == '__main__':
    sys.exit(main())
