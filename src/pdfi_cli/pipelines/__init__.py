from .base import MissingObject, ObjectResult, PipelineKind, RenderedObject
from .extract import (
    extract_metadata,
    extract_objects,
    extract_paper,
    extract_text,
    extract_xref,
    read_file,
    run_pipeline,
)

__all__ = [
    "MissingObject",
    "ObjectResult",
    "PipelineKind",
    "RenderedObject",
    "extract_metadata",
    "extract_objects",
    "extract_paper",
    "extract_text",
    "extract_xref",
    "read_file",
    "run_pipeline",
]
