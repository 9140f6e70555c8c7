"""Pydantic schemas for JSON output validation.

This module defines the data structures for all JSON outputs from the CLI,
so that --json output has the same shape whichever command produced it.

Commands using Pydantic validation:
- render: RenderResponse | ErrorResponse
- preview: RenderResponse | ErrorResponse
- validate: ValidateResponse | ErrorResponse
- config: ConfigResponse | ErrorResponse
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Base Response Models
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "invalid_input", "data_error")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "data_error", "render_failed"],
    )
    message: str = Field(description="Human-readable error description")


# ============================================================================
# Render / Preview Responses
# ============================================================================


class RenderedPath(BaseModel):
    """Outcome of rendering one song.

    Attributes:
        source: File (or "<tags>" for preview) the metadata came from
        path: Rendered relative path, absent on failure
        unique: Whether a title or track number went into the path
        error: Why rendering failed, absent on success
    """

    source: str = Field(description="Where the metadata came from")
    path: Optional[str] = Field(default=None, description="Rendered relative path")
    unique: bool = Field(default=False, description="Path contains a title or track")
    error: Optional[str] = Field(default=None, description="Failure reason")


class RenderResponse(BaseModel):
    """Response for render and preview.

    Attributes:
        status: "success", "completed_with_errors" or "failed"
        format: Organize format that was used
        rendered: Number of songs rendered
        failed: Number of songs that could not be rendered
        results: One entry per song, in input order
    """

    status: Literal["success", "completed_with_errors", "failed"]
    format: str = Field(description="Organize format used")
    rendered: int = Field(ge=0, description="Songs rendered")
    failed: int = Field(ge=0, description="Songs that failed")
    results: List[RenderedPath]


# ============================================================================
# Validate Command Response
# ============================================================================


class ValidateResponse(BaseModel):
    """Response for validate.

    Attributes:
        status: Validator state, lower-case
        format: Format that was checked
        unknown_tags: Tag names that are not known tags
    """

    status: Literal["acceptable", "intermediate", "invalid"]
    format: str = Field(description="Format that was checked")
    unknown_tags: List[str] = Field(default_factory=list)


# ============================================================================
# Config Command Response
# ============================================================================


class ConfigResponse(BaseModel):
    """Current settings, as stored in the configuration file."""

    config_path: str
    format: str
    extension: Optional[str] = None
    sanitize: Dict[str, bool]
    saved: bool = False
