"""The Command Line Interface for the utility, including Interactive elements.

Generates a key pair and prints its numbers. Missing arguments are asked for interactively unless non-interactive mode
is active, in which case defaults apply.

Typical usage example:

    rsaprimer --bits 512
    OR
    python -m rsaprimer -n --bits 8 --message 42
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import typing
import warnings

import rsaprimer
from rsaprimer import keygen


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "bits":
        HelpData(
            description=f"Modulus size in bits. Even and at least {keygen.MIN_KEY_SIZE}.",
            format=int,
            default=keygen.DEFAULT_KEY_SIZE,
        ),
    "message":
        HelpData(
            description="Integer message representative to run through encryption and decryption.",
            format=int,
        ),
}


def key_size(value: str) -> int:
    """argparse type for `--bits`."""
    bits = int(value)
    if bits < keygen.MIN_KEY_SIZE or bits % 2 != 0:
        raise argparse.ArgumentTypeError(help_dict["bits"].description)
    return bits


corep = argparse.ArgumentParser(prog="rsaprimer", description="Generate a textbook RSA key pair.")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsaprimer.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--bits", "-b", type=key_size, help=help_dict["bits"].description)
corep.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
corep.add_argument("--show-primes", "-p", action="store_true", help="Also print the primes p and q.")
corep.add_argument("--verbose", action="count", default=0, help="Log progress. Repeat for debug output.")


def input_handler(arg: str, prntr: typing.Callable = print) -> typing.Any:
    """Ask for `arg` until a valid value or the default is given."""
    helper_data = help_dict[arg]
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        try:
            return key_size(ch) if arg == "bits" else helper_data.format(ch)
        except (ValueError, argparse.ArgumentTypeError):
            prntr(f"We could not use {ch!r} as {arg}.")


def main(argv: list[str] | None = None) -> int:
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG if args.verbose > 1 else logging.INFO,
                            format="%(levelname)s %(name)s: %(message)s")
    if args.bits is None:
        args.bits = help_dict["bits"].default if args.non_interactive else input_handler("bits")

    pair = rsaprimer.RSAKeyPair.new(args.bits)
    n, e = pair.public_key()
    _, d = pair.private_key()
    print(f"bits: {pair.bits}")
    print(f"n: {n}")
    print(f"e: {e}")
    print(f"d: {d}")
    if args.show_primes:
        print(f"p: {pair.key.p}")
        print(f"q: {pair.key.q}")
    if args.message is not None:
        warnings.warn("Textbook RSA is unsecure! Please use with care.", RuntimeWarning)
        if not 0 <= args.message < n:
            print(f"Message must be in range [0, {n - 1}] for this key.")
            return 2
        ciphertext = pair.encrypt(args.message)
        print(f"ciphertext: {ciphertext}")
        print(f"decrypted: {pair.decrypt(ciphertext)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
