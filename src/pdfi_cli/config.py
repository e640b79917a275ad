# src/pdfi_cli/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class CliConfig:
    """Presentation settings for one CLI invocation.

    Immutable. Explicit. No magic defaults from environment.
    """

    verbose: bool = False
    colorize: bool = False  # Force ANSI styling of diagnostic lines
