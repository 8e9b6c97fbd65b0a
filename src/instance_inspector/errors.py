"""
Exceptions raised while inspecting a JSON instance document.

Every failure aborts the whole inspection; callers never see a partially
built schema document.
"""

from typing import Any, Dict, Mapping, Optional


class InspectionError(Exception):
    """Base class for all inspection failures."""

    code = "inspection_error"

    def __init__(self, message: str, *, code: Optional[str] = None, context: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.code
        self.context = dict(context or {})

    def as_log_fields(self) -> Dict[str, Any]:
        return {
            "error_code": self.code,
            "error_message": self.message,
            "error_context": self.context,
        }


class InvalidInputError(InspectionError):
    """Empty input, a scalar document root, or a bad option value."""

    code = "invalid_input"


class DecodeError(InspectionError):
    code = "decode_failure"


class UnsupportedShapeError(InspectionError):
    """The document has a shape the inspector refuses to describe (arrays of arrays)."""

    code = "unsupported_shape"


class DepthLimitError(UnsupportedShapeError):
    code = "depth_limit"


class FrozenDocumentError(InspectionError):
    code = "frozen_document"
