import logging
import sys
from typing import Sequence

from pydantic import ValidationError

from hashiter.bootstrap.config.loader import get_cli_args, get_configfile
from hashiter.bootstrap.config.settings import HashIterSettings
from hashiter.core.builder import DoubleHashBuilder
from hashiter.core.exception import ConfigurationError
from hashiter.core.utils.log import setup_logging

logger = logging.getLogger("hashiter.bootstrap.main")


def load_settings(args) -> HashIterSettings:
    overrides = {
        "width": args.width,
        "seed1": args.seed1,
        "seed2": args.seed2,
        "n": args.modulus,
        "k": args.count,
    }
    overrides = {name: value for name, value in overrides.items() if value is not None}

    configfile = get_configfile(args)
    if configfile is None:
        return HashIterSettings(**overrides)

    logger.info("Loading configuration from %s", configfile)
    settings = HashIterSettings.from_yaml(configfile)
    if overrides:
        settings = HashIterSettings(**{**settings.model_dump(), **overrides})
    return settings


def entrypoint(argv: Sequence[str] | None = None) -> int:
    args = get_cli_args(argv)
    setup_logging(args.log_level)

    try:
        settings = load_settings(args)
        hasher = DoubleHashBuilder.from_settings(settings).build()
    except (ConfigurationError, ValidationError) as e:
        print(f"hashiter: {e}", file=sys.stderr)
        return 2

    for key in args.keys:
        points = " ".join(str(p) for p in hasher.hash_iter(key))
        print(f"{key}: {points}")

    return 0
