"""The Command Line Interface for the cipher lab, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that asks interactively for whatever
the command line left out, unless told to stay non-interactive.

Typical usage example:

    cipherlab
    OR
    python -m cipherlab encrypt --algorithm caesar --shift 3 --message "Hello"
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing

import cipherlab


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in the cipher lab.",
            choices=["keygen", "encrypt", "decrypt"],
        ),
    "keygen":
        HelpData("Toy RSA key generation utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "algorithm":
        HelpData(
            description="The cipher to use.",
            choices=["caesar", "rsa"],
            default="caesar",
        ),
    "caesar":
        HelpData("Caesar shift cipher."),
    "rsa":
        HelpData("Toy per-character RSA. Warning! Unsecure."),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
        ),
    "private_key":
        HelpData(
            description="Location of the private key file.",
            format=pathlib.Path,
        ),
    "message":
        HelpData(
            description="Message or path to file containing payload. If Path start with `P:`",
            format=str,
        ),
    "shift":
        HelpData(
            description="Caesar shift, taken modulo 26.",
            format=int,
            default=3,
        ),
    "bits":
        HelpData(
            description="Bit width of each RSA prime.",
            format=int,
            advanced=True,
            default=32,
        ),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "keygen": ("public_key", "private_key", "bits"),
    "encrypt": ("algorithm", "message"),
    "decrypt": ("algorithm", "message"),
}

algorithm_needs = {
    ("caesar", "encrypt"): ("shift",),
    ("caesar", "decrypt"): ("shift",),
    ("rsa", "encrypt"): ("public_key",),
    ("rsa", "decrypt"): ("private_key",),
}

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-p", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-P",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
payloads.add_argument("--algorithm", "-A", choices=help_dict["algorithm"].choices, help=help_dict["algorithm"].description)
payloads.add_argument("--shift", "-s", type=help_dict["shift"].format, help=help_dict["shift"].description)
corep = argparse.ArgumentParser(prog="cipherlab")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {cipherlab.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", action="store_true", help="Log key generation details")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", parents=[privkey, pubkey], help=help_dict["keygen"].description)
keygen.add_argument("--bits", "-b", type=help_dict["bits"].format, help=help_dict["bits"].description)
keygen.add_argument("--overwrite", "-o", action="store_const", const="Y", help=help_dict["overwrite"].description)

encrypt = commands.add_parser("encrypt", parents=[pubkey, payloads], help=help_dict["encrypt"].description)
decrypt = commands.add_parser("decrypt", parents=[privkey, payloads], help=help_dict["decrypt"].description)


def prompt(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    """Fill a missing argument from its default, or ask for it when interactive."""
    data = help_dict[arg]
    if data.default is not None and (mode[0] or (data.advanced and not mode[1])):
        return data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    prntr(f"Please specify the {arg}! {data.description}")
    for choice in data.choices or ():
        prntr(f"  {choice} - {help_dict[choice].description}" if choice in help_dict else f"  {choice}")
    if data.default is not None:
        prntr(f"Press enter to accept the default ({data.default}).")
    while True:
        ch = input(f"{arg}: ")
        if not ch and data.default is not None:
            return data.default
        if not ch or (data.choices and ch not in data.choices):
            prntr("Please provide a valid value.")
            continue
        try:
            return data.format(ch)
        except ValueError:
            prntr(f"We could not convert your value to {data.format.__name__}.")


def check_message(mess: str) -> str:
    """Parse message for path-notice."""
    if mess.startswith("P:"):
        mess = mess[2:]
        with open(mess, "r", encoding="utf-8") as f:
            mess = f.read()
    return mess


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    def fill(reqs: typing.Iterable[str]):
        for req in reqs:
            if getattr(args, req, None) is None:
                setattr(args, req, prompt(req, pstatus, pspr))
            else:
                pspr(f"{req}: {getattr(args, req)}")

    pspr("Welcome to the Cipher Lab!\n")
    try:
        if not args.subcommand:
            args.subcommand = prompt("subcommand", pstatus, pspr)
        fill(needs[args.subcommand])
        if args.subcommand != "keygen":
            fill(algorithm_needs[(args.algorithm, args.subcommand)])
        pspr("\nInput Complete! Executing...")
        match args.subcommand:
            case "keygen":
                if args.private_key.exists() or args.public_key.exists():
                    rs = getattr(args, "overwrite", None)
                    if rs is None:
                        rs = prompt("overwrite", pstatus, pspr)
                    if rs == "N":
                        print("Destination private or public key already exists!")
                        return
                keys = cipherlab.RsaKeyPair.generate(int(args.bits))
                keys.private_key.export(args.private_key)
                keys.public_key.export(args.public_key)
                pspr(f"\nKey pair generated! (n={keys.public_key.n}, e={keys.public_key.e})")
            case "encrypt":
                message = check_message(args.message)
                if args.algorithm == "rsa":
                    result = cipherlab.PublicKey.import_key(args.public_key).encrypt(message)
                else:
                    result = cipherlab.caesar_encrypt(message, int(args.shift))
                pspr("Ciphertext:")
                print(result)
            case "decrypt":
                message = check_message(args.message)
                if args.algorithm == "rsa":
                    result = cipherlab.PrivateKey.import_key(args.private_key).decrypt(message)
                else:
                    result = cipherlab.caesar_decrypt(message, int(args.shift))
                pspr("Cleartext:")
                print(result)
    except (ValueError, IOError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    pspr("Thank you for using the Cipher Lab!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
