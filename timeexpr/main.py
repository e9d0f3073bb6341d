import asyncio
import logging
import math
import sys
from datetime import timedelta
from typing import Iterable, List, Optional

import uvicorn

from .checks import is_compound_time_expression, is_time_expression
from .cli import parse_args
from .conversions import CONVERTERS
from .errors import ContractError
from .formatting import format
from .log import configure_logging
from .parsers import parse
from .webapp import create_app

logger = logging.getLogger(__name__)


def _display_number(value: float) -> str:
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def parse_expressions(expressions: Iterable[str], unit: str = "ms") -> List[str]:
    convert = CONVERTERS[unit]
    lines = []
    for expr in expressions:
        value = convert(expr)
        if math.isnan(value):
            raise ValueError(f"cannot parse {expr!r}")
        lines.append(_display_number(value))
    return lines


def format_values(
    values: Iterable[float], long: bool = False, precision: int = 1
) -> List[str]:
    return [format(value, long=long, precision=precision) for value in values]


def check_expressions(
    expressions: Iterable[str],
    single: bool = False,
    max_duration: Optional[timedelta] = None,
) -> List[bool]:
    predicate = is_time_expression if single else is_compound_time_expression
    limit = None
    if max_duration is not None:
        limit = max_duration.total_seconds() * 1000
    results = []
    for expr in expressions:
        valid = predicate(expr)
        if valid and limit is not None:
            valid = abs(parse(expr)) <= limit
        results.append(valid)
    return results


async def serve_async(params):
    host = getattr(params, "host", "127.0.0.1")
    port = getattr(params, "port", 8000)
    log_level = getattr(params, "log_level", "WARNING").lower()

    app = create_app()
    config = uvicorn.Config(
        app, host=host, port=port, loop="asyncio", log_level=log_level
    )
    server = uvicorn.Server(config)
    logger.info("serving time expression API on http://%s:%s", host, port)
    await server.serve()


def main(argv: Optional[List[str]] = None):
    params = parse_args(argv if argv is not None else sys.argv[1:])
    configure_logging(params.log_level)
    try:
        if params.command == "parse":
            for line in parse_expressions(params.expressions, params.unit):
                print(line)
        elif params.command == "format":
            for line in format_values(params.values, params.long, params.precision):
                print(line)
        elif params.command == "check":
            results = check_expressions(
                params.expressions,
                params.single,
                getattr(params, "max_duration", None),
            )
            for expr, valid in zip(params.expressions, results):
                print(f"{'valid' if valid else 'invalid'}\t{expr}")
            if not all(results):
                sys.exit(1)
        elif params.command == "serve":
            try:
                asyncio.run(serve_async(params))
            except KeyboardInterrupt:
                print("\n[interrupt] server exiting…")
        else:
            raise ValueError(f"Unknown command: {params.command}")
    except (ContractError, ValueError) as exc:
        print(f"[error] {exc}")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - exercised via CLI invocation
    main(sys.argv[1:])
