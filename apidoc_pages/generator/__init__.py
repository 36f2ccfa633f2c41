"""Utilities for rendering and assembling the API reference page."""

from .anchors import HeadingAnchorExtension
from .models import ReferencePage
from .page_generator import (
    ApiReferenceGenerator,
    SourceDocumentError,
    TransformResult,
    transform_markdown,
)
from .renderer import HtmlContentRenderer

__all__ = [
    "ApiReferenceGenerator",
    "HeadingAnchorExtension",
    "HtmlContentRenderer",
    "ReferencePage",
    "SourceDocumentError",
    "TransformResult",
    "transform_markdown",
]
