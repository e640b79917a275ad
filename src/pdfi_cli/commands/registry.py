# src/pdfi_cli/commands/registry.py

import logging

from pdfi_cli.errors import UnknownCommandError
from pdfi_cli.pipelines.base import PipelineKind

from .command import Command

logger = logging.getLogger(__name__)


class CommandRegistry:
    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        if command.id in self._commands:
            raise ValueError(f"Command '{command.id}' already registered")

        self._commands[command.id] = command
        logger.debug("Registered command: %s", command.id)

    def get(self, command_id: str) -> Command:
        try:
            return self._commands[command_id]
        except KeyError:
            logger.debug("Command not found: %s", command_id)
            raise UnknownCommandError(command_id) from None

    def list(self) -> dict[str, Command]:
        # return a shallow copy to avoid mutation
        return dict(self._commands)

    def usage(self, program: str = "pdfi") -> str:
        lines = [
            f"Usage: {program} <command> <filename> [<args>]",
            "",
            "Commands:",
            *(f"  {c.id}: {c.description}" for c in self._commands.values()),
        ]
        examples = [c.example for c in self._commands.values() if c.example]
        if examples:
            lines += ["", "Examples:"]
            lines += [f"  {cmd}  # {desc}" for cmd, desc in examples]
        return "\n".join(lines)


def default_registry() -> CommandRegistry:
    registry = CommandRegistry()
    registry.register(
        Command(id="text", description="Extract text", kind=PipelineKind.TEXT)
    )
    registry.register(
        Command(
            id="paper",
            description="Extract text as a structured paper (JSON format)",
            kind=PipelineKind.PAPER,
        )
    )
    registry.register(
        Command(
            id="metadata",
            description="Print trailer as JSON",
            kind=PipelineKind.METADATA,
        )
    )
    registry.register(
        Command(
            id="xref",
            description="Print cross references as JSON",
            kind=PipelineKind.XREF,
        )
    )
    registry.register(
        Command(
            id="objects",
            description="Print specific objects",
            kind=PipelineKind.OBJECTS,
            min_args=1,
            example=(
                "pdfi objects Sci.pdf 1 14:0 106",
                'print objects "1:0", "14:0", and "106:0"',
            ),
        )
    )
    return registry
