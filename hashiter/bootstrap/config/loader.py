import argparse
import os
from pathlib import Path
from typing import Sequence


def get_cli_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hashiter",
        description=(
            "Print enhanced double hashing points for one or more keys.\n\n"
            "Each key is hashed twice (two seeds) and k points in [0, n) are\n"
            "derived from the two base values."
        ),
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument(
        "keys",
        nargs="+",
        metavar="KEY",
        help="Keys to hash. Each key is hashed as a string."
    )

    parser.add_argument(
        "-k", "--count",
        type=int,
        default=None,
        help=(
            "Number of hash points per key.\n"
            "Defaults to the configured k."
        ),
    )

    parser.add_argument(
        "-n", "--modulus",
        type=int,
        default=None,
        help=(
            "Exclusive upper bound of the produced values.\n"
            "Defaults to the maximum of the selected width.\n\n"
            "Example:\n"
            "  --modulus 1024"
        ),
    )

    parser.add_argument(
        "-w", "--width",
        type=str,
        default=None,
        choices=["U32", "U64", "U128", "32", "64", "128"],
        help="Width of the produced values (U32, U64 or U128).",
    )

    parser.add_argument("--seed1", type=int, default=None, help="Seed of the first base hash.")
    parser.add_argument("--seed2", type=int, default=None, help="Seed of the second base hash.")

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to a hashiter YAML configuration file"
    )

    parser.add_argument(
        "-l", "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=(
            "Logging verbosity.\n"
            "Choose among: DEBUG, INFO, WARNING, ERROR, CRITICAL.\n\n"
            "DEBUG    → shows the resolved hasher configuration.\n"
            "WARNING  → only warnings and errors (default).\n\n"
            "Example:\n"
            "  --log-level DEBUG"
        ),
    )

    return parser.parse_args(argv)


def get_configfile(args: argparse.Namespace) -> Path | None:
    # Priority: CLI > ENV > default file in current working directory
    raw = args.config or os.getenv("HASHITER_CONFIG")

    if raw is None:
        file = Path.cwd() / "hashiter.yaml"
        return file if file.is_file() else None

    file = Path(raw)
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Use --config <file.yaml>\n"
            "  - Or set the HASHITER_CONFIG environment variable\n"
            "  - Or place a 'hashiter.yaml' file in the current working directory."
        )

    return file
