"""
Custom Exception Hierarchy for the VPC source share reader

This module provides the exception hierarchy used across the reader. Every
error carries a structured error code and context so that a failed read can
be localized (which share, which field, which tag namespace) from the
message alone.
"""

from typing import Any, Dict, Optional


class ShareSourceError(Exception):
    """
    Base exception class for all source share reader errors.

    Provides structured error information including context, error codes,
    and optional recovery suggestions.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
        recovery_suggestion: Optional[str] = None,
    ) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional dictionary with error context
            cause: Optional underlying exception that caused this error
            recovery_suggestion: Optional suggestion for error recovery
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause
        self.recovery_suggestion = recovery_suggestion

    def __str__(self) -> str:
        """Return a formatted error message with context."""
        result = self.message
        if self.error_code:
            result = f"[{self.error_code}] {result}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            result += f" (context: {context_str})"
        if self.cause:
            result += f" (caused by: {self.cause})"
        if self.recovery_suggestion:
            result += f" (suggestion: {self.recovery_suggestion})"
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None,
            "recovery_suggestion": self.recovery_suggestion,
        }


# Remote share lookup exceptions
class ShareLookupError(ShareSourceError):
    """Base class for errors raised while fetching a share."""

    pass


class ShareNotFoundError(ShareLookupError):
    """Raised when the share (or its source) does not exist."""

    def __init__(
        self, message: str, share_id: Optional[str] = None, **kwargs: Any
    ) -> None:
        context = dict(kwargs.get("context") or {})
        if share_id:
            context["share_id"] = share_id
        kwargs["context"] = context
        kwargs.setdefault("error_code", "SHARE_NOT_FOUND")
        super().__init__(message, **kwargs)


class ShareAPIError(ShareLookupError):
    """Raised when the VPC API answered with a non-404 error status."""

    def __init__(
        self,
        message: str,
        share_id: Optional[str] = None,
        status_code: Optional[int] = None,
        transaction_id: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        context = dict(kwargs.get("context") or {})
        if share_id:
            context["share_id"] = share_id
        if status_code is not None:
            context["status_code"] = status_code
        if transaction_id:
            context["transaction_id"] = transaction_id
        kwargs["context"] = context
        kwargs.setdefault("error_code", "SHARE_API_ERROR")
        if status_code in (401, 403):
            kwargs.setdefault(
                "recovery_suggestion",
                "Check the IBM Cloud API key and its IAM access to VPC file shares",
            )
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.transaction_id = transaction_id


class ShareTransportError(ShareLookupError):
    """Raised when no response was received from the VPC API."""

    def __init__(
        self,
        message: str,
        share_id: Optional[str] = None,
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> None:
        context = dict(kwargs.get("context") or {})
        if share_id:
            context["share_id"] = share_id
        if timeout:
            context["timeout"] = timeout
        kwargs["context"] = context
        kwargs.setdefault("error_code", "SHARE_TRANSPORT_ERROR")
        kwargs.setdefault(
            "recovery_suggestion",
            "Check network connectivity to the VPC endpoint and the configured region",
        )
        super().__init__(message, **kwargs)


# Projection exceptions
class ProjectionError(ShareSourceError):
    """Base class for errors raised while projecting a share into attributes."""

    pass


class SchemaTypeError(ProjectionError):
    """Raised when a value does not match the declared attribute schema."""

    def __init__(
        self, message: str, attribute: Optional[str] = None, **kwargs: Any
    ) -> None:
        context = dict(kwargs.get("context") or {})
        if attribute:
            context["attribute"] = attribute
        kwargs["context"] = context
        kwargs.setdefault("error_code", "SCHEMA_TYPE_MISMATCH")
        super().__init__(message, **kwargs)
        self.attribute = attribute


class FieldAssignmentError(ProjectionError):
    """Raised when a normalized value cannot be assigned to the attribute set."""

    def __init__(
        self, field_name: str, cause: Optional[BaseException] = None, **kwargs: Any
    ) -> None:
        context = dict(kwargs.get("context") or {})
        context["field"] = field_name
        kwargs["context"] = context
        kwargs.setdefault("error_code", "FIELD_ASSIGNMENT_FAILED")
        detail = "unknown"
        if cause is not None:
            detail = getattr(cause, "message", None) or str(cause)
        super().__init__(
            f"Error setting {field_name}: {detail}", cause=cause, **kwargs
        )
        self.field_name = field_name


class InvalidShareIdentifierError(ProjectionError):
    """Raised when the replica share identifier is missing or malformed."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("error_code", "INVALID_SHARE_ID")
        kwargs.setdefault(
            "recovery_suggestion", "Pass the identifier of an existing replica share"
        )
        super().__init__(message, **kwargs)


# Tagging exceptions
class TagLookupError(ShareSourceError):
    """Raised when a global tagging query fails."""

    def __init__(
        self,
        message: str,
        crn: Optional[str] = None,
        tag_type: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        context = dict(kwargs.get("context") or {})
        if crn:
            context["crn"] = crn
        if tag_type:
            context["tag_type"] = tag_type
        kwargs["context"] = context
        kwargs.setdefault("error_code", "TAG_LOOKUP_FAILED")
        super().__init__(message, **kwargs)
        self.tag_type = tag_type


# Configuration-related exceptions
class ConfigurationError(ShareSourceError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(
        self, message: str, config_section: Optional[str] = None, **kwargs: Any
    ) -> None:
        context = dict(kwargs.get("context") or {})
        if config_section:
            context["config_section"] = config_section
        kwargs["context"] = context
        kwargs.setdefault("error_code", "INVALID_CONFIG")
        kwargs.setdefault(
            "recovery_suggestion", "Check configuration file and environment variables"
        )
        super().__init__(message, **kwargs)


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(
        self, message: str, missing_keys: Optional[list[str]] = None, **kwargs: Any
    ) -> None:
        context = dict(kwargs.get("context") or {})
        if missing_keys:
            context["missing_keys"] = missing_keys
        kwargs["context"] = context
        kwargs.setdefault("error_code", "MISSING_CONFIG")
        kwargs.setdefault(
            "recovery_suggestion",
            f"Set required configuration: {', '.join(missing_keys)}"
            if missing_keys
            else "Set required configuration",
        )
        super().__init__(message, **kwargs)


# Utility functions for exception handling
def wrap_ibm_exception(
    exc: BaseException,
    share_id: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None,
) -> ShareLookupError:
    """
    Wrap an IBM Cloud SDK exception in our custom exception hierarchy.

    ``ApiException`` instances expose the HTTP status as ``status_code``; a
    missing status means the SDK never got a response and is treated as a
    transport failure.

    Args:
        exc: The original exception
        share_id: Identifier of the share that was being fetched
        context: Optional context information

    Returns:
        ShareLookupError: Wrapped exception with enhanced context
    """
    status_code = getattr(exc, "status_code", None)
    if not isinstance(status_code, int) or status_code == 0:
        return ShareTransportError(
            f"Transport failure fetching source share: {exc}",
            share_id=share_id,
            context=context,
            cause=exc,
        )

    message = getattr(exc, "message", None) or str(exc)
    if status_code == 404:
        return ShareNotFoundError(
            f"Source share not found: {message}",
            share_id=share_id,
            context=context,
            cause=exc,
        )
    return ShareAPIError(
        f"GetShareSourceWithContext failed: {message}",
        share_id=share_id,
        status_code=status_code,
        transaction_id=getattr(exc, "global_transaction_id", None),
        context=context,
        cause=exc,
    )
