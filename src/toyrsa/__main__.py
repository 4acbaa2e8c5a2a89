"""The Command Line Interface for the toy cryptosystem, including Interactive elements.

What I would call a hybrid CLI/ICLI (Command Line Interface/Interactive Command Lice Interface) that automagically
generates the INTERACTIVE part on-the-fly based on the missing components of the CLI interaction, including the
option that none are included. Keys and ciphertexts are passed around as armored text, nothing is stored.

Typical usage example:

    toyrsa
    OR
    python -m toyrsa demo --message "Hello World"
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing

import toyrsa
from toyrsa import codec


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in toyrsa.",
            choices=["keygen", "encrypt", "decrypt", "demo"],
        ),
    "keygen":
        HelpData("Key generation utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "demo":
        HelpData("Generate a key pair, then encrypt and decrypt a message with it."),
    "public_key":
        HelpData(description="Armored public key, as printed by keygen.", format=str),
    "private_key":
        HelpData(description="Armored private key, as printed by keygen.", format=str),
    "message":
        HelpData(
            description="Message, armored ciphertext or path to file containing payload. If Path start with `P:`",
            format=str,
        ),
    "demo_message":
        HelpData(description="Message to run through the demonstration.", format=str, default="Hello World"),
    "encoding":
        HelpData(description="Payload encoding.", choices=["utf-8", "utf-16", "ascii"], advanced=True, default="utf-8"),
    "low":
        HelpData(
            description="Lower bound of the prime search range.",
            format=int,
            advanced=True,
            default=toyrsa.DEFAULT_RANGE.low,
        ),
    "high":
        HelpData(
            description="Upper bound of the prime search range.",
            format=int,
            advanced=True,
            default=toyrsa.DEFAULT_RANGE.high,
        ),
}

needs = {
    "keygen": ("low", "high"),
    "encrypt": ("public_key", "message", "encoding"),
    "decrypt": ("private_key", "message", "encoding"),
    "demo": ("demo_message", "low", "high"),
}

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-p", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-P",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", type=help_dict["message"].format, help=help_dict["message"].description)
encp = argparse.ArgumentParser(add_help=False)
encp.add_argument("--encoding", "-e", choices=help_dict["encoding"].choices, help=help_dict["encoding"].description)
ranges = argparse.ArgumentParser(add_help=False)
ranges.add_argument("--low", type=help_dict["low"].format, help=help_dict["low"].description)
ranges.add_argument("--high", type=help_dict["high"].format, help=help_dict["high"].description)
corep = argparse.ArgumentParser(prog="toyrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {toyrsa.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Enable debug logging")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", parents=[ranges], help=help_dict["keygen"].description)
keygen.add_argument("--distinct", "-d", action="store_true", help="Force the two primes to differ")
encrypt = commands.add_parser("encrypt", parents=[pubkey, payloads, encp], help=help_dict["encrypt"].description)
decrypt = commands.add_parser("decrypt", parents=[privkey, payloads, encp], help=help_dict["decrypt"].description)
demo = commands.add_parser("demo", parents=[ranges], help=help_dict["demo"].description)
demo.add_argument("--message", dest="demo_message", help=help_dict["demo_message"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    """Resolve an argument without prompting where the mode allows it.

    Non-interactive mode, and advanced arguments outside advanced mode, fall back to the default.

    Returns:
        The default value, or the `HelpData` to prompt with.

    Raises:
        IOError: If non-interactive mode is active and the argument has no default.
    """
    helper_data = help_dict[arg]
    silent = mode[0] or (helper_data.advanced and not mode[1])
    if silent and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def _announce(arg: str, helper_data: HelpData, prntr: typing.Callable) -> None:
    prntr(f"Please specify the {arg}!")
    prntr(f"Description: {helper_data.description}")
    if helper_data.choices is None and helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
    for choice in helper_data.choices or ():
        described = f"{choice} - {help_dict[choice].description}" if choice in help_dict else choice
        prntr(described + (" (Default)" if choice == helper_data.default else ""))
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    _announce(arg, helper_data, prntr)
    while (ch := input(f"{arg}: ")) not in helper_data.choices:
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")
    return ch


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    _announce(arg, helper_data, prntr)
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch:
            if helper_data.default is not None:
                return helper_data.default
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def read_payload(mess: str, enc: str) -> str:
    """Return the message itself, or the contents of the file it points at when prefixed with `P:`."""
    if mess.startswith("P:"):
        return pathlib.Path(mess[2:]).read_text(encoding=enc)
    return mess


def execute(args: argparse.Namespace, pspr: typing.Callable) -> None:
    """Run the selected subcommand on fully populated arguments."""
    match args.subcommand:
        case "keygen":
            kp = toyrsa.generate_key_pair(args.low, args.high, distinct_primes=args.distinct)
            pspr("Public key:")
            print(codec.armor_public_key(kp.public_key))
            pspr("Private key:")
            print(codec.armor_private_key(kp.private_key))
            pspr("\nKey pair generated!")
        case "encrypt":
            args.message = read_payload(args.message, args.encoding)
            rpu = codec.dearmor_public_key(args.public_key)
            blocks = toyrsa.encrypt(rpu, args.message, args.encoding)
            pspr("Ciphertext:")
            print(codec.armor_ciphertext(blocks))
        case "decrypt":
            args.message = read_payload(args.message, "ascii")
            rpk = codec.dearmor_private_key(args.private_key)
            clear = toyrsa.decrypt(rpk, codec.dearmor_ciphertext(args.message))
            pspr("Cleartext:")
            print(clear.decode(args.encoding))
        case "demo":
            kp = toyrsa.generate_key_pair(args.low, args.high, distinct_primes=True)
            pspr(f"Public key (e, n): {tuple(kp.public_key)}")
            pspr(f"Private key (d, n): {tuple(kp.private_key)}")
            blocks = toyrsa.encrypt(kp.public_key, args.demo_message)
            pspr("Ciphertext blocks:")
            print(" ".join(block.hex() for block in blocks))
            pspr("Cleartext:")
            print(toyrsa.decrypt(kp.private_key, blocks).decode("utf-8"))


def main():
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Lice Interface)"""
    args = corep.parse_args()
    pstatus = (args.non_interactive, args.advanced)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s")
    logging.captureWarnings(True)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to toyrsa! Warning! These keys are for demonstration only.\n")
    try:
        if not args.subcommand:
            args.subcommand = choice_handler("subcommand", pstatus)
            # Flags of the subparser never got parsed.
            args.distinct = False
        for reqs in needs[args.subcommand]:
            if getattr(args, reqs, None) is None:
                if help_dict[reqs].choices is not None:
                    res = choice_handler(reqs, pstatus)
                else:
                    res = input_handler(reqs, pstatus)
                setattr(args, reqs, res)
            else:
                pspr(f"{reqs}: {getattr(args, reqs)}")
        pspr("\nInput Complete! Executing...")
        execute(args, pspr)
    except (toyrsa.ToyRSAError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    pspr("Thank you for using toyrsa!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
