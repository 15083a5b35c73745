from __future__ import annotations

import argparse
import builtins
import json
import logging
import sys
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any, NoReturn

if TYPE_CHECKING:
    from conststruct.record import ConstRecord

logger = logging.getLogger(__name__)
print = partial(builtins.print, flush=True)


def _parse_assignment(value: str) -> tuple[str, Any]:
    name, sep, raw = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    try:
        return name, json.loads(raw)
    except json.JSONDecodeError:
        return name, raw


def _get_argument_parser(prog: str) -> argparse.ArgumentParser:
    import textwrap

    from conststruct.options import DisplayOptions, LoggingOptions

    parser = argparse.ArgumentParser(
        prog,
        formatter_class=lambda prog: argparse.RawDescriptionHelpFormatter(prog, width=120, max_help_position=60),
        description=textwrap.dedent(
            """
            Load a JSON object into a record with constant fields and display it.

            Fields added with --set cannot overwrite fields of the loaded object.
            """
        ),
    )
    parser.add_argument(
        "file",
        metavar="FILE",
        nargs="?",
        default="-",
        help="the JSON file to load, or - to read from stdin [default: %(default)s]",
    )
    parser.add_argument(
        "-s",
        "--set",
        metavar="NAME=VALUE",
        dest="assignments",
        action="append",
        default=[],
        type=_parse_assignment,
        help="add a field after loading the file. VALUE is parsed as JSON, or taken as a plain string if that "
        "fails. can be specified multiple times",
    )
    parser.add_argument(
        "--struct",
        action="store_true",
        help="print the fields as a JSON object instead of the record display",
    )
    LoggingOptions.add_to_parser(parser)
    DisplayOptions.add_to_parser(parser)
    return parser


def load_record(file: str) -> ConstRecord:
    from conststruct.record import ConstRecord

    if file == "-":
        data = json.load(sys.stdin)
    else:
        with Path(file).open(encoding="utf-8") as fp:
            data = json.load(fp)
    logger.info("Loaded %s from %s", type(data).__name__, "stdin" if file == "-" else file)
    return ConstRecord.from_struct(data)


def main(prog: str = "conststruct", argv: list[str] | None = None) -> NoReturn:
    from conststruct.exceptions import ConstError
    from conststruct.options import DisplayOptions, LoggingOptions

    parser = _get_argument_parser(prog)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    LoggingOptions.collect(args).init_logging()

    try:
        record = load_record(args.file)
        for name, value in args.assignments:
            record.set(name, value)
    except (ConstError, OSError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    if args.struct:
        print(json.dumps(record.to_struct(), indent=2))
    else:
        record.show(file=sys.stdout, options=DisplayOptions.collect(args))

    sys.exit(0)


if __name__ == "__main__":
    main()
