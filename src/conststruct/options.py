from __future__ import annotations

import dataclasses
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import argparse

DEFAULT_MARKER = "<CONST>"


@dataclasses.dataclass(frozen=True)
class DisplayOptions:
    """Controls how a :class:`~conststruct.record.ConstRecord` is rendered by :meth:`ConstRecord.format` and
    :meth:`ConstRecord.show`."""

    marker: str = DEFAULT_MARKER
    color: bool = False
    indent: int = 4

    @staticmethod
    def add_to_parser(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--marker",
            metavar="TEXT",
            default=DEFAULT_MARKER,
            help="the tag prepended to every field line [default: %(default)s]",
        )
        parser.add_argument(
            "--color",
            action="store_true",
            default=None,
            help="color the field marker [default: when stdout is a terminal]",
        )
        parser.add_argument(
            "--no-color",
            dest="color",
            action="store_false",
            help="do not color the field marker",
        )

    @classmethod
    def collect(cls, args: argparse.Namespace) -> DisplayOptions:
        color = args.color if args.color is not None else sys.stdout.isatty()
        return cls(marker=args.marker, color=color)

    def render_marker(self) -> str:
        """Returns the marker, colored if :attr:`color` is set. Coloring is unconditional, so that `--color` also
        applies when the output is piped."""

        if not self.color:
            return self.marker

        from termcolor import colored

        return colored(self.marker, "magenta", attrs=["bold"], force_color=True)


#: Log levels from the quietest to the most verbose setting; the default `-v`/`-q` balance selects `WARNING`.
LOG_LEVELS = ("ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass(frozen=True)
class LoggingOptions:
    """The `-v` and `-q` flags of the command line. They cancel each other out."""

    verbosity: int
    quietness: int

    @staticmethod
    def add_to_parser(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-v",
            dest="verbosity",
            action="count",
            default=0,
            help="log more, -vv includes every field that is added or cleared",
        )
        parser.add_argument(
            "-q",
            dest="quietness",
            action="count",
            default=0,
            help="log less, -q hides the const warnings and leaves only errors",
        )

    @classmethod
    def collect(cls, args: argparse.Namespace) -> LoggingOptions:
        return cls(args.verbosity, args.quietness)

    @property
    def level(self) -> str:
        index = LOG_LEVELS.index("WARNING") + self.verbosity - self.quietness
        return LOG_LEVELS[min(max(index, 0), len(LOG_LEVELS) - 1)]

    def init_logging(self) -> None:
        """Configure the root logger with a colored `level | logger | message` format. Warnings issued through the
        :mod:`warnings` module, such as the advisories of a :class:`~conststruct.record.ConstRecord`, are routed
        into the log as well, so `-q` silences them."""

        import logging

        from termcolor import colored

        fmt = " | ".join(
            (
                colored("%(levelname)-7s", "magenta"),
                colored("%(name)-20s", "blue"),
                colored("%(message)s", "cyan"),
            )
        )
        logging.basicConfig(level=self.level, format=fmt)
        logging.captureWarnings(True)
