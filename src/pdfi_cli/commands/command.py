# src/pdfi_cli/commands/command.py

from pydantic import BaseModel, ConfigDict

from pdfi_cli.pipelines.base import PipelineKind


class Command:
    def __init__(
        self,
        *,
        id: str,
        description: str,
        kind: PipelineKind,
        min_args: int = 0,
        example: tuple[str, str] | None = None,
    ) -> None:
        self.id = id
        self.description = description
        self.kind = kind
        self.min_args = min_args  # positional arguments required after the filename
        self.example = example


class CommandCall(BaseModel):
    model_config = ConfigDict(extra="forbid")

    command_id: str
    filename: str | None = None
    args: list[str] = []
    decode: bool = False
