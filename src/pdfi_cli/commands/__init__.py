from .command import Command, CommandCall
from .registry import CommandRegistry, default_registry
from .router import CommandRouter

__all__ = [
    "Command",
    "CommandCall",
    "CommandRegistry",
    "CommandRouter",
    "default_registry",
]
