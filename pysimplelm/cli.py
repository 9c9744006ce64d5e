"""
salary-estimator: fit the salary model and predict one salary.

    salary-estimator                       # bundled sample, prompt for years
    salary-estimator --years 5
    salary-estimator --data salary.csv --x-column YearsExperience --y-column Salary
"""

import argparse
import math
import sys

from pysimplelm.core.datasource import DataSource
from pysimplelm.core.exceptions import PySimpleLMError
from pysimplelm.datasets import load_salary
from pysimplelm.regression import fit

PROMPT = "Enter how many years of work experience you have."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='salary-estimator',
        description='Predict salary from years of experience with a least-squares line',
    )
    parser.add_argument(
        '--data', '-d',
        metavar='PATH',
        help='CSV with a header line and one x,y pair per line (default: bundled sample)',
    )
    parser.add_argument(
        '--x-column',
        metavar='NAME',
        help='Predictor column (default: first column)',
    )
    parser.add_argument(
        '--y-column',
        metavar='NAME',
        help='Response column (default: second column)',
    )
    parser.add_argument(
        '--years',
        type=float,
        help='Years of experience to predict for (default: read from stdin)',
    )
    return parser


def _read_years(stdin) -> float:
    print(PROMPT)
    line = stdin.readline()
    try:
        return float(line.strip())
    except ValueError:
        raise ValueError(f"not a number: {line.strip()!r}") from None


def main(argv: list[str] | None = None, stdin=None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin

    if (args.x_column is None) != (args.y_column is None):
        print("ERROR: give both --x-column and --y-column, or neither", file=sys.stderr)
        return 1

    try:
        source = DataSource.from_file(args.data) if args.data else load_salary()
        model = fit(source, args.y_column, x_column=args.x_column)
    except PySimpleLMError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyError as e:
        print(f"ERROR: {e.args[0]}", file=sys.stderr)
        return 1

    if args.years is not None:
        years = args.years
    else:
        try:
            years = _read_years(stdin)
        except ValueError as e:
            print(f"ERROR: years of experience {e}", file=sys.stderr)
            return 1

    if not math.isfinite(years):
        print(f"ERROR: years of experience must be finite, got {years}", file=sys.stderr)
        return 1

    prediction = model.predict(years)

    print(model.describe())
    print(
        f"The predicted salary of a person with {years} year(s) of experience "
        f"is ${prediction:.2f}"
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
