"""Pydantic schemas for the REST API."""

from doorpanels.web.schemas.requests import (
    CalculateFromConfigRequest,
    CalculateRequest,
    ConfigValidateRequest,
    ExportRequest,
)
from doorpanels.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayoutResultSchema,
    PeepholeSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "CalculateFromConfigRequest",
    "CalculateRequest",
    "ConfigValidateRequest",
    "ExportRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LayoutResultSchema",
    "PeepholeSchema",
    "ValidationResultSchema",
]
