"""
Common Models
Shared response shapes.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Error class name")
    details: Optional[Union[Dict[str, Any], List[Any]]] = Field(None, description="Extra context")


class ErrorResponse(BaseModel):
    """Error envelope returned by the error handlers."""

    error: ErrorDetail


class PaginationInfo(BaseModel):
    """Pagination block for list responses."""

    page: int = Field(..., ge=1, description="Current page (1-indexed)")
    limit: int = Field(..., ge=1, description="Page size")
    total: int = Field(..., ge=0, description="Total matching items")
    total_pages: int = Field(..., ge=0, description="Number of pages")
    start_item: int = Field(..., ge=0, description="1-based index of first item on page")
    end_item: int = Field(..., ge=0, description="1-based index of last item on page")
    pages: List[Union[int, str]] = Field(
        default_factory=list, description="Page links to display, with '...' gaps"
    )
