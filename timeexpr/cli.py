import argparse
from typing import List

from .conversions import CONVERTERS
from .durations import parse_duration

LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {text}")
    return value


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tx", description="Convert between milliseconds and time expressions"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="Logging verbosity",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser("parse", help="Convert expressions to a number")
    parse.add_argument("expressions", nargs="+", metavar="EXPR", help="Expressions")
    parse.add_argument(
        "--unit",
        choices=sorted(CONVERTERS),
        default="ms",
        help="Unit of the printed value",
    )

    fmt = subparsers.add_parser("format", help="Convert milliseconds to expressions")
    fmt.add_argument(
        "values", nargs="+", type=float, metavar="MS", help="Millisecond values"
    )
    fmt.add_argument(
        "--long", action="store_true", help="Use unit names instead of symbols"
    )
    fmt.add_argument(
        "--precision",
        type=positive_int,
        default=1,
        help="Maximum number of unit segments",
    )

    check = subparsers.add_parser("check", help="Validate expressions")
    check.add_argument("expressions", nargs="+", metavar="EXPR", help="Expressions")
    check.add_argument(
        "--single",
        action="store_true",
        help="Reject compound expressions such as '1h 30m'",
    )
    check.add_argument(
        "--max-duration",
        type=parse_duration,
        help="Reject expressions longer than this duration (e.g. 7d, 12h)",
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP conversion API")
    serve.add_argument("--host", default="127.0.0.1", help="Host interface for the API")
    serve.add_argument(
        "--port", type=int, default=8000, help="Port to bind the HTTP server"
    )

    return parser


def parse_args(argv):
    parser = create_parser()
    return parser.parse_args(argv)
