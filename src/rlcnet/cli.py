"""
Command-line front end: pick one of the canonical circuits, enter the
frequency and element values, and print the impedance report.

Usage::

    rlcnet                          # interactive
    rlcnet 2 -f 60 -R 100 -C 1e-6 -L 0.01
    rlcnet --list

Values missing from the command line are asked for interactively.
"""
from __future__ import annotations
import argparse
import logging
import math
import sys
from typing import Callable

from .report import format_report
from .templates import CircuitTemplate, build_circuit

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]

_ELEMENT_PROMPTS = {
    "R": ("resistance", "Enter resistance value (Ohms): "),
    "C": ("capacitance", "Enter capacitance value (Farads): "),
    "L": ("inductance", "Enter inductance value (Henry): "),
}


def _parse_number(text: str) -> float:
    value = float(text.strip())
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def _positive_float(text: str) -> float:
    """argparse type for the frequency: a finite number > 0."""
    try:
        value = _parse_number(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError("frequency must be > 0")
    return value


def _finite_float(text: str) -> float:
    try:
        return _parse_number(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}")


def prompt_value(
    message: str,
    error: str,
    validate: Callable[[float], bool] = lambda v: True,
    input_fn: InputFn = input
) -> float:
    """Asks for a number until the answer parses and passes `validate`."""
    while True:
        answer = input_fn(message)
        try:
            value = _parse_number(answer)
        except ValueError:
            print(error)
            continue
        if validate(value):
            return value
        print(error)


def prompt_template(input_fn: InputFn = input) -> CircuitTemplate:
    print("Choose circuit type: ")
    for template in CircuitTemplate:
        print(template)
    while True:
        answer = input_fn("").strip()
        try:
            return CircuitTemplate.from_number(int(answer))
        except (ValueError, KeyError):
            print("Error: Invalid circuit type. Please enter an integer between 1 and 8.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rlcnet",
        description="Impedance and phase of simple series/parallel RLC circuits.",
    )
    parser.add_argument(
        "template", nargs="?", type=int, choices=[t.number for t in CircuitTemplate],
        help="circuit type (see --list)",
    )
    parser.add_argument("-f", "--frequency", type=_positive_float, help="frequency (Hz)")
    parser.add_argument("-R", "--resistance", type=_finite_float, help="resistance (Ohms)")
    parser.add_argument("-C", "--capacitance", type=_finite_float, help="capacitance (Farads)")
    parser.add_argument("-L", "--inductance", type=_finite_float, help="inductance (Henry)")
    parser.add_argument("--list", action="store_true", help="list the circuit types and exit")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="more logging output (-v info, -vv debug)",
    )
    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None, input_fn: InputFn = input) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.list:
        for template in CircuitTemplate:
            print(template)
        return 0

    try:
        if args.template is None:
            template = prompt_template(input_fn)
        else:
            template = CircuitTemplate.from_number(args.template)

        frequency = args.frequency
        if frequency is None:
            frequency = prompt_value(
                "Frequency (Hz): ",
                "Error: Invalid frequency. Please enter a valid number.",
                validate=lambda v: v > 0,
                input_fn=input_fn,
            )

        values: dict[str, float] = {}
        for letter in template.elements:
            name, message = _ELEMENT_PROMPTS[letter]
            value = getattr(args, name)
            if value is None:
                value = prompt_value(
                    message,
                    f"Error: Invalid {name} value. Please enter a valid number.",
                    input_fn=input_fn,
                )
            values[name] = value
        print()

        circuit = build_circuit(template, frequency, **values)
    except EOFError:
        logger.error("Input ended before all values were entered.")
        return 1
    except (ArithmeticError, ValueError) as e:
        logger.error("%s", e)
        return 1

    print(format_report(circuit.network))
    return 0


if __name__ == "__main__":
    sys.exit(main())
