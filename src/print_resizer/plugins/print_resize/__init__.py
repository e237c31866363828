"""Print resize plugin."""

from .schema import PrintResizeParams
from .service import ResizeService
from .task import ResizePipeline

__all__ = ["PrintResizeParams", "ResizePipeline", "ResizeService"]
