"""
Interactive command line front end.

Usage:
    fantasticcal                      # Ask for a name, then calculate
    fantasticcal --name Ada           # Skip the name prompt
    python -m fantasticcal --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import zoneinfo
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

from fantasticcal.catalog import BoundOperator, descriptions
from fantasticcal.config import VERSION, configure_logging
from fantasticcal.evaluator import evaluate, render
from fantasticcal.exceptions import CalculatorError
from fantasticcal.matcher import match_operator
from fantasticcal.validators import parse_number

logger = logging.getLogger(__name__)

NUMBER_RETRY = (
    "Are you sure, that you printed a number? Try again! "
    "Valid number should follow pattern: X or X.X where X is a digit (i.e. 4 or -5.7) -> |"
)
OPERATOR_RETRY = "Unknown operator. Use one of the operators listed above -> |"
ANSWER_RETRY = "I didn't understand you. Please, type 'Y' or 'N' for 'Yes' and 'No' (Y/N): "

LOCALTIME = "/etc/localtime"
ZONEINFO_MARKER = "zoneinfo/"


class EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


@dataclass
class TimeInfo:
    day_time: str
    zone: str


def day_time(hour: int) -> str:
    """Part of the day used in the greeting."""
    if 0 <= hour <= 5:
        return "night"
    if hour <= 12:
        return "morning"
    if hour <= 18:
        return "day"
    return "evening"


def zone_id(now: datetime) -> str:
    """
    IANA name of the zone, e.g. ``Europe/Oslo``.

    Falls back to $TZ, then the /etc/localtime link, then the abbreviation.
    """
    if isinstance(now.tzinfo, zoneinfo.ZoneInfo) and now.tzinfo.key:
        return now.tzinfo.key

    name = os.environ.get("TZ", "").lstrip(":")
    if name in zoneinfo.available_timezones():
        return name

    target = os.path.realpath(LOCALTIME)
    if ZONEINFO_MARKER in target:
        return target.split(ZONEINFO_MARKER, 1)[1]

    return now.tzname() or "unknown"


def time_info(now: datetime | None = None) -> TimeInfo:
    if now is None or now.tzinfo is None:
        now = (now or datetime.now()).astimezone()
    return TimeInfo(day_time=day_time(now.hour), zone=zone_id(now))


def title(version: str = VERSION) -> str:
    return (
        "                FANTASTIC CALCULATOR\n"
        "                    (or just FanC)\n"
        f"    Welcome to the FANTASTIC CALCULATOR version {version}!"
    )


def greeting(name: str | None, info: TimeInfo) -> str:
    shown = name.strip() if name and name.strip() else "- whatever your name is"
    return f"Good {info.day_time}, {shown}! You are in zone: {info.zone}"


def instructions() -> str:
    """Usage text listing every operator."""
    lines = [f"{symbol} -> {description}" for symbol, description in descriptions().items()]
    return "\n".join(
        [
            "Let's do some Math! This calculator can do following operations:",
            *lines,
            "Please, if your number is decimal, use '.'",
        ]
    )


class Session:
    """One interactive session reading from and writing to text streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def write(self, text: str, end: str = "\n") -> None:
        self._stdout.write(text + end)
        self._stdout.flush()

    def read(self, prompt: str) -> str:
        self.write(prompt, end="")
        line = self._stdin.readline()
        if not line:
            raise EndOfInput
        return line.rstrip("\n")

    def read_number(self, prompt: str) -> float:
        text = self.read(prompt)
        while True:
            try:
                return parse_number(text)
            except CalculatorError as e:
                logger.info("Rejected number input: %s", e)
                text = self.read(NUMBER_RETRY)

    def read_operator(self, prompt: str) -> BoundOperator:
        text = self.read(prompt).strip()
        operator = match_operator(text)
        while operator is None:
            logger.info("Rejected operator input: %r", text)
            text = self.read(OPERATOR_RETRY).strip()
            operator = match_operator(text)
        return operator

    def read_continue(self) -> bool:
        answer = self.read("Do you want to continue calculating? (Y/N): ").strip().upper()
        while answer not in ("Y", "N"):
            answer = self.read(ANSWER_RETRY).strip().upper()
        return answer == "Y"

    def calculate_once(self) -> None:
        """Read one calculation and print its result or the reason it failed."""
        first = self.read_number("Print your first number here -> |")
        operator = self.read_operator("Print your operator here -> |")
        second = None
        if not operator.is_unary:
            second = self.read_number("Print your second number here -> |")

        try:
            self.write(f"Result: {render(evaluate(first, operator, second))}")
        except CalculatorError as e:
            logger.info("Calculation failed: %s", e)
            self.write(f"Error: {e}")

    def run(self, name: str | None = None) -> int:
        self.write(title())
        if name is None:
            name = self.read("Please, stay calm and print your name: ")
        self.write(greeting(name, time_info()))
        self.write(instructions())

        while True:
            self.calculate_once()
            if not self.read_continue():
                return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fantasticcal",
        description="Interactive calculator for one operator at a time.",
    )
    parser.add_argument("--name", help="Name used in the greeting (skips the prompt)")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $FANTASTICAL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    session = Session(stdin or sys.stdin, stdout or sys.stdout)
    try:
        return session.run(args.name)
    except EndOfInput:
        session.write("")
        return 0
    except KeyboardInterrupt:
        session.write("")
        return 130
