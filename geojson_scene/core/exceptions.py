"""Unified loader exception taxonomy.

Every domain exception inherits from ``GeoJsonSceneError`` and carries
structured context fields that let callers tell input errors apart from
transient network conditions.

Taxonomy categories
-------------------
- ``ValidationError``: malformed or unsupported input, never retryable.
- ``TransientError``: temporary failures (network, timeouts), retryable.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and error event listeners.
"""

from __future__ import annotations


class GeoJsonSceneError(Exception):
    """Base exception for all loader-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Pipeline stage where the error occurred
            (e.g. ``"resolve_crs"``, ``"dispatch"``).
        code: Machine-readable error code (e.g. ``"CRS_UNKNOWN_NAME"``).
        retryable: Whether repeating the operation could succeed.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeoJsonSceneError):
    """Input or document validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(GeoJsonSceneError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Document errors
# ---------------------------------------------------------------------------


class MissingArgumentError(ValidationError):
    """Raised when a required argument (document or URL) is ``None``."""

    default_stage = "load"
    default_code = "MISSING_ARGUMENT"


class UnsupportedDocumentTypeError(ValidationError):
    """Raised when a document's ``type`` has no dispatcher entry."""

    default_stage = "dispatch"
    default_code = "UNSUPPORTED_DOCUMENT_TYPE"


class UnknownGeometryTypeError(ValidationError):
    """Raised when a geometry's ``type`` is not a GeoJSON geometry kind."""

    default_stage = "dispatch"
    default_code = "UNKNOWN_GEOMETRY_TYPE"


class MissingGeometryError(ValidationError):
    """Raised when a Feature has no ``geometry`` member at all."""

    default_stage = "dispatch"
    default_code = "MISSING_GEOMETRY"


# ---------------------------------------------------------------------------
# CRS errors
# ---------------------------------------------------------------------------


class CrsError(ValidationError):
    """Base class for malformed or unresolvable ``crs`` members."""

    default_stage = "resolve_crs"
    default_code = "CRS_INVALID"


class InvalidCrsError(CrsError):
    """Raised when ``crs`` is ``null`` or lacks ``properties``."""


class UnknownCrsNameError(CrsError):
    """Raised when a named CRS is not registered."""

    default_code = "CRS_UNKNOWN_NAME"


class UnresolvableCrsLinkError(CrsError):
    """Raised when no resolver matches a linked CRS href or type."""

    default_code = "CRS_UNRESOLVABLE_LINK"


class UnknownCrsTypeError(CrsError):
    """Raised when ``crs.type`` is neither ``name`` nor ``link``."""

    default_code = "CRS_UNKNOWN_TYPE"


# ---------------------------------------------------------------------------
# Fetch errors
# ---------------------------------------------------------------------------


class FetchError(TransientError):
    """Raised when a GeoJSON document cannot be fetched or decoded.

    Attributes:
        url: The URL that was requested.
        status_code: HTTP status code, or ``None`` if no response arrived.
    """

    default_stage = "fetch"
    default_code = "FETCH_FAILED"

    def __init__(
        self,
        url: str,
        message: str,
        *,
        status_code: int | None = None,
        retryable: bool = True,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message, retryable=retryable)
