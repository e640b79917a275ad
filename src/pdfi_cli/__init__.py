__version__ = "0.1.0"

# Addresses
from .addresses import ObjectAddress

# Commands
from .commands import (
    Command,
    CommandCall,
    CommandRegistry,
    CommandRouter,
    default_registry,
)
from .config import CliConfig

# Errors
from .errors import (
    ClosedError,
    DecodeError,
    MalformedAddressError,
    MissingArgumentError,
    ParseError,
    PdfiError,
    ReferenceNotFoundError,
    UnknownCommandError,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Pipelines
from .pipelines import PipelineKind, read_file, run_pipeline
from .rendering import BinaryOutput, JsonOutput, ObjectRenderer

# Sources
from .sources import ByteSource, FileSystemSource, SourceReader

__all__ = [
    "__version__",
    # Addresses
    "ObjectAddress",
    # Commands
    "CliConfig",
    "Command",
    "CommandCall",
    "CommandRegistry",
    "CommandRouter",
    "default_registry",
    # Errors
    "ClosedError",
    "DecodeError",
    "MalformedAddressError",
    "MissingArgumentError",
    "ParseError",
    "PdfiError",
    "ReferenceNotFoundError",
    "UnknownCommandError",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Pipelines
    "PipelineKind",
    "read_file",
    "run_pipeline",
    # Rendering
    "BinaryOutput",
    "JsonOutput",
    "ObjectRenderer",
    # Sources
    "ByteSource",
    "FileSystemSource",
    "SourceReader",
]
