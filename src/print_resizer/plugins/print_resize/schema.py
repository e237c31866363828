"""Print resize parameters schema."""

from pydantic import BaseModel, Field

from ...common.schemas import TargetSpec, UploadedImage


class PrintResizeParams(BaseModel):
    """Parameters for one print resize run.

    Attributes:
        upload: Accepted upload (already through the guard)
        target: Resolved and clamped output size and DPI
    """

    upload: UploadedImage = Field(description="Accepted upload")
    target: TargetSpec = Field(default_factory=TargetSpec, description="Output size and DPI")
