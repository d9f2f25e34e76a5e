import argparse
import logging
import sys
from typing import Callable, List, Optional
from . import constants
from .curve import Curve
from .modular import reduce
from .point import Point
from .protocol import run_exchange

logger = logging.getLogger(__name__)

CURVE_FIELDS = (
    ("p", "Prime modulus p: ", constants.P),
    ("a", "Curve coefficient a: ", constants.A),
    ("b", "Curve coefficient b: ", constants.B),
)

EXCHANGE_FIELDS = CURVE_FIELDS + (
    ("gx", "Base point G (x): ", constants.G_x),
    ("gy", "Base point G (y): ", constants.G_y),
    ("da", "Private key of A (dA): ", constants.D_A),
    ("db", "Private key of B (dB): ", constants.D_B),
    ("message", "Plaintext message (integer): ", constants.MESSAGE),
)


def _fill_missing(args, fields, prompt: Callable[[str], str]) -> None:
    # Values not given on the command line are asked for, unless --defaults.
    for name, text, default in fields:
        if getattr(args, name) is not None:
            continue
        if args.defaults:
            setattr(args, name, default)
            continue
        while True:
            try:
                setattr(args, name, int(prompt(text)))
                break
            except ValueError:
                print("Please enter an integer.")


def _format_points(points) -> str:
    return ",".join(str(point) for point in points)


def points(args, prompt: Callable[[str], str] = input) -> None:
    _fill_missing(args, CURVE_FIELDS, prompt)
    curve = Curve(args.p, args.a, args.b)
    curve_points = curve.points()
    print(f"Curve: {curve}")
    print(f"Points of the curve ({len(curve_points)}): {_format_points(curve_points)}")


def exchange(args, prompt: Callable[[str], str] = input) -> None:
    _fill_missing(args, EXCHANGE_FIELDS, prompt)
    curve = Curve(args.p, args.a, args.b)
    g = Point(reduce(args.gx, args.p), reduce(args.gy, args.p))
    if not curve.contains(g):
        logger.warning("base point %s is not on the curve %s", g, curve)

    result = run_exchange(curve, g, args.da, args.db, args.message)
    a = result.party_a
    b = result.party_b

    print(f"Points of the curve: {_format_points(result.curve_points)}")
    print(f"Public key of B: dBG={b.private}{g}={b.public}")
    print(f"Public key of A: dAG={a.private}{g}={a.public}")
    print(f"Shared secret computed by A: {a.private}*{b.public}={result.shared_secret_a}")
    print(f"Shared secret computed by B: {b.private}*{a.public}={result.shared_secret_b}")
    print(f"M={result.bound}")
    print(f"h={result.slot_width}={curve.p}//{result.bound}")
    print(f"Encoded message Qm={result.encoded_message}")
    print(f"Ciphertext and public key sent from A to B: {result.ciphertext}")


def _add_curve_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--p", type=int, help="Prime modulus of the field.")
    parser.add_argument("--a", type=int, help="Curve coefficient a.")
    parser.add_argument("--b", type=int, help="Curve coefficient b.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecdemo",
        description="Elliptic curve Diffie-Hellman and ElGamal on a small curve.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each step.")
    parser.add_argument(
        "--defaults",
        action="store_true",
        help="Use the built-in demonstration values instead of prompting.",
    )
    subparsers = parser.add_subparsers()

    parser_points = subparsers.add_parser("points", help="List the points of a curve.")
    _add_curve_arguments(parser_points)
    parser_points.set_defaults(func=points)

    parser_exchange = subparsers.add_parser(
        "exchange", help="Agree on a key and encrypt a message."
    )
    _add_curve_arguments(parser_exchange)
    parser_exchange.add_argument("--gx", type=int, help="x-coordinate of the base point G.")
    parser_exchange.add_argument("--gy", type=int, help="y-coordinate of the base point G.")
    parser_exchange.add_argument("--da", type=int, help="Private key of party A.")
    parser_exchange.add_argument("--db", type=int, help="Private key of party B.")
    parser_exchange.add_argument("--message", type=int, help="Plaintext integer to encrypt.")
    parser_exchange.set_defaults(func=exchange)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return

    try:
        args.func(args)
    except EOFError:
        parser.exit(1, "ecdemo: error: input ended before all values were given\n")
    except ValueError as e:
        parser.exit(1, f"ecdemo: error: {e}\n")


if __name__ == "__main__":
    main()
