"""
Error types for the APIM flow kernel.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    code: str
    details: Dict[str, Any] = {}


class FlowError(Exception):
    """Base exception for flow evaluation."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.message, code=self.code, details=self.details)


class CatalogReadError(FlowError):
    """Catalog data exists but cannot be parsed."""

    def __init__(self, message: str = "Catalog could not be read", details: Optional[Dict[str, Any]] = None):
        super().__init__("CATALOG_READ_ERROR", message, details)


class ValidationError(FlowError):
    """A catalog record is missing a required identifier."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_CATALOG_ENTRY", message, details)
