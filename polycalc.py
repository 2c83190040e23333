"""
This script does arithmetic on one or two polynomials given on the command line, printing the results. Coefficients
are comma-separated, starting with the constant term, so 3 - x + 2x^2 is written 3,-1,2. For example:

    python polycalc.py 1,2,3 1,1 --at 2
    python polycalc.py -1,0,1 1,1 --at -1/2

Lists and points starting with a minus sign are read as numbers rather than options. Anything after a bare -- is
always read as a polynomial.
"""

import argparse
import logging
import re
import sys
from fractions import Fraction

from unipoly import Mod, Polynomial, gcd

_logger = logging.getLogger('polycalc')

FIELDS = ('rational', 'float', 'mod')
VALUE_OPTIONS = ('--field', '--modulus', '--at', '--log-level')
NEGATIVE = re.compile(r'^-[\d.]')


def make_parser():
    parser = argparse.ArgumentParser('polycalc', description='Arithmetic on univariate polynomials', allow_abbrev=False)
    parser.add_argument('p', type=str, help='Coefficients of p, constant term first, e.g. 3,-1,2 or -1,0,1')
    parser.add_argument('q', type=str, nargs='?', help='Coefficients of q, in the same format')
    parser.add_argument('--field', choices=FIELDS, default='rational', help='Coefficient type to compute with')
    parser.add_argument('--modulus', type=int, default=7, help='Prime modulus for --field mod')
    parser.add_argument('--at', type=str, action='append', default=[], help='Point to evaluate at (repeatable)')
    parser.add_argument('--log-level', type=str.upper, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')
    return parser


def separate_positionals(argv: list[str]) -> list[str]:
    """
    Reorder arguments so that argparse cannot mistake a negative number for an option: option values are attached
    with '=', and the polynomials are moved after a '--'.

    >>> separate_positionals(['-1,0,1', '--at', '-2', '1,1'])
    ['--at=-2', '--', '-1,0,1', '1,1']
    """
    options, positionals = [], []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == '--':
            positionals += argv[i + 1:]
            break

        following = argv[i + 1] if i + 1 < len(argv) else None
        if arg in VALUE_OPTIONS and following is not None and (
                not following.startswith('-') or NEGATIVE.match(following)):
            options.append(f'{arg}={following}')
            i += 2
            continue

        if arg.startswith('-') and not NEGATIVE.match(arg):
            options.append(arg)
        else:
            positionals.append(arg)
        i += 1

    return options + ['--'] + positionals


def is_prime(n: int) -> bool:
    return n >= 2 and all(n % d != 0 for d in range(2, int(n ** 0.5) + 1))


def coefficient_parser(field: str, modulus: int):
    if field == 'rational':
        return Fraction
    if field == 'float':
        return float
    return lambda s: Mod.of(int(s), modulus)


def parse_poly(text: str, parse) -> Polynomial:
    """Parse a comma separated coefficient list like '3,-1,2'."""
    return Polynomial(parse(part.strip()) for part in text.split(',') if part.strip())


def main(argv=None) -> int:
    parser = make_parser()
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        args = parser.parse_args(separate_positionals(argv))
        if args.field == 'mod' and not is_prime(args.modulus):
            parser.error(f'--modulus must be a prime, was given {args.modulus}')
    except SystemExit as e:
        return e.code

    logging.basicConfig(level=args.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    parse = coefficient_parser(args.field, args.modulus)
    try:
        p = parse_poly(args.p, parse)
        q = parse_poly(args.q, parse) if args.q is not None else None
        points = [parse(x) for x in args.at]
    except (ValueError, ZeroDivisionError) as e:
        print(f'polycalc: error: {e}', file=sys.stderr)
        return 2

    _logger.info("Computing over %s with p = %s, q = %s", args.field, p, q)

    print(f'p = {p}')
    if q is not None:
        print(f'q = {q}')
        print(f'p + q = {p + q}')
        print(f'p - q = {p - q}')
        print(f'p * q = {p * q}')
        try:
            quotient, remainder = divmod(p, q)
        except ZeroDivisionError:
            print('p / q = undefined (division by zero)')
        else:
            print(f'p / q = {quotient}')
            print(f'p % q = {remainder}')
        print(f'p(q) = {p.compose(q)}')
        print(f'gcd(p, q) = {gcd(p, q)}')

    for x in points:
        print(f'p({x}) = {p(x)}')
        if q is not None:
            print(f'q({x}) = {q(x)}')

    return 0


if __name__ == '__main__':
    sys.exit(main())
