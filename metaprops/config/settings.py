"""
Run configuration: rendering options from the command line, settings from the environment
"""

import argparse
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import ENV_DEBUG, ENV_LOG_FILE

TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class RenderConfig:
    """Display options, fixed for the whole run."""
    use_canonical_names: bool = False
    use_both_names: bool = False
    include_keys: bool = False
    include_flags: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RenderConfig":
        return cls(
            use_canonical_names=args.canonical,
            use_both_names=args.both,
            include_keys=args.keys,
            include_flags=args.flags,
        )


@dataclass(frozen=True)
class RunSettings:
    """Settings that do not change the listing itself."""
    debug: bool = False
    log_file: Optional[str] = None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> RunSettings:
    """Read run settings from the environment."""
    if environ is None:
        environ = os.environ
    return RunSettings(
        debug=environ.get(ENV_DEBUG, '').strip().lower() in TRUTHY,
        log_file=environ.get(ENV_LOG_FILE) or None,
    )
