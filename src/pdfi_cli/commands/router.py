# src/pdfi_cli/commands/router.py

import dataclasses
import json
import logging
from collections.abc import Iterable
from time import monotonic
from typing import Any, BinaryIO, TextIO

import typer

from pdfi_cli.addresses import ObjectAddress
from pdfi_cli.config import CliConfig
from pdfi_cli.errors import MissingArgumentError, PdfiError
from pdfi_cli.observability import names
from pdfi_cli.observability.base import MetricsHook, NoOpMetricsHook
from pdfi_cli.parsers.models import Paper
from pdfi_cli.pipelines.base import MissingObject, ObjectResult, PipelineKind, RenderedObject
from pdfi_cli.pipelines.extract import run_pipeline
from pdfi_cli.rendering import BinaryOutput, JsonOutput
from pdfi_cli.sources.filesystem import FileSystemSource

from .command import CommandCall
from .registry import CommandRegistry

logger = logging.getLogger(__name__)


class CommandRouter:
    """
    Resolves a CommandCall to its pipeline and writes the results.

    Payloads go to `stdout` (binary, so decoded streams pass through
    untouched); diagnostic lines go to `stderr`.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        config: CliConfig,
        stdout: BinaryIO,
        stderr: TextIO,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.registry = registry
        self.config = config
        self.stdout = stdout
        self.stderr = stderr
        self.metrics_hook = metrics_hook

    def dispatch(self, call: CommandCall) -> int:
        """Run one command and return the process exit status.

        Raises:
            UnknownCommandError: If the command id is not registered.
            MissingArgumentError: If the filename or required args are absent.
            MalformedAddressError: If an object address token is invalid.
            ParseError, DecodeError, OSError: On extraction failures.
        """
        command = self.registry.get(call.command_id)
        if call.filename is None:
            raise MissingArgumentError(f"Command '{command.id}' requires a filename")
        if len(call.args) < command.min_args:
            raise MissingArgumentError(
                f"Command '{command.id}' requires at least {command.min_args} "
                f"argument(s) after the filename"
            )
        # parse every token before touching the file; other commands ignore extras
        addresses: list[ObjectAddress] = []
        if command.kind is PipelineKind.OBJECTS:
            addresses = [ObjectAddress.parse(token) for token in call.args]
        elif call.args:
            logger.debug("Ignoring extra arguments for %s: %s", command.id, call.args)

        labels = {"command": command.id}
        logger.debug("Dispatching %s on %s", command.id, call.filename)
        start = monotonic()
        try:
            with FileSystemSource.open(call.filename) as source:
                result = run_pipeline(command.kind, source, addresses, decode=call.decode)
                if command.kind is PipelineKind.OBJECTS:
                    status = self._emit_objects(result)
                else:
                    self._emit(result)
                    status = 0
        except (PdfiError, OSError):
            self.metrics_hook.increment(names.COMMAND_ERRORS_TOTAL, labels=labels)
            raise
        finally:
            elapsed_ms = 1000 * (monotonic() - start)
            self.metrics_hook.record_latency(names.COMMAND_DURATION, elapsed_ms, labels)
            self.metrics_hook.increment(names.COMMANDS_TOTAL, labels=labels)
        return status

    def diagnostic(self, line: str) -> None:
        typer.echo(
            typer.style(line, fg="magenta"),
            file=self.stderr,
            color=self.config.colorize,
        )
        self.stderr.flush()

    def _emit(self, result: Any) -> None:
        if isinstance(result, str):
            self._write_line(result)
        elif isinstance(result, Paper):
            self._write_json(dataclasses.asdict(result))
        else:
            self._write_json(result)

    def _emit_objects(self, results: Iterable[ObjectResult]) -> int:
        status = 0
        for result in results:
            match result:
                case RenderedObject(address=address, location=location, output=output):
                    self.diagnostic(f"{address} [{location.describe()}]")
                    match output:
                        case BinaryOutput(data=data):
                            self.stdout.write(data)
                            self.stdout.flush()
                            self.metrics_hook.increment(names.OBJECTS_DECODED_BYTES, len(data))
                        case JsonOutput(value=value):
                            self._write_json(value)
                    self.metrics_hook.increment(names.OBJECTS_RENDERED_TOTAL)
                case MissingObject(address=address, error=error):
                    self.diagnostic(f"{address} [error={error}]")
                    self.metrics_hook.increment(names.OBJECTS_MISSING_TOTAL)
                    status = 1
        return status

    def _write_json(self, value: Any) -> None:
        self._write_line(json.dumps(value, ensure_ascii=False))

    def _write_line(self, line: str) -> None:
        self.stdout.write(line.encode("utf-8") + b"\n")
        self.stdout.flush()
