################################################################################
# File Name: error_handler.py
# Purpose/Description: Classified error hierarchy and error reporting helpers
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Stable error codes, dropped retry helpers
# ================================================================================
################################################################################

"""
Error handling module.

Provides centralized error handling with:
- Custom exception classes carrying a stable machine-readable code
- Error classification (retryable, config, data, system)
- Structured error reporting

Usage:
    from common.error_handler import DataError, handleError

    try:
        result = operation()
    except Exception as e:
        handleError(e, context={'vin': vin}, reraise=False)
"""

import logging
import traceback
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of errors for classification."""
    RETRYABLE = 'retryable'       # Upstream/transport, another provider may answer
    CONFIGURATION = 'config'      # Config errors, fail fast
    DATA = 'data'                 # Bad input or no usable data
    SYSTEM = 'system'             # Unexpected errors


# ================================================================================
# Custom Exception Classes
# ================================================================================

class BaseError(Exception):
    """Base exception for all custom errors."""

    category: ErrorCategory = ErrorCategory.SYSTEM
    code: str = 'INTERNAL_ERROR'

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def toDict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            'type': self.__class__.__name__,
            'code': self.code,
            'category': self.category.value,
            'message': self.message,
            'details': self.details
        }


class RetryableError(BaseError):
    """Transient upstream failure (network timeout, 5xx, rate limit)."""
    category = ErrorCategory.RETRYABLE
    code = 'UPSTREAM_ERROR'


class ConfigurationError(BaseError):
    """Configuration validation failure."""
    category = ErrorCategory.CONFIGURATION
    code = 'CONFIG_INVALID'


class DataError(BaseError):
    """Data validation or processing error."""
    category = ErrorCategory.DATA
    code = 'DATA_INVALID'


# ================================================================================
# Error Classification
# ================================================================================

def classifyError(error: Exception) -> ErrorCategory:
    """
    Classify an error into a category.

    Args:
        error: Exception to classify

    Returns:
        ErrorCategory for the error
    """
    if isinstance(error, BaseError):
        return error.category

    errorType = type(error).__name__.lower()
    errorMessage = str(error).lower()

    # requests/urllib3/socket failures
    if any(term in errorType for term in ['timeout', 'connection', 'network', 'http']):
        return ErrorCategory.RETRYABLE

    if 'rate limit' in errorMessage or '429' in errorMessage:
        return ErrorCategory.RETRYABLE

    if any(term in errorMessage for term in ['config', 'missing', 'required']):
        return ErrorCategory.CONFIGURATION

    if any(term in errorMessage for term in ['validation', 'invalid', 'parse', 'json']):
        return ErrorCategory.DATA

    return ErrorCategory.SYSTEM


# ================================================================================
# Error Handling
# ================================================================================

def handleError(
    error: Exception,
    context: dict[str, Any] | None = None,
    reraise: bool = True
) -> dict[str, Any]:
    """
    Handle an error with logging and classification.

    Args:
        error: Exception that occurred
        context: Additional context information
        reraise: Whether to re-raise the exception

    Returns:
        Error details dictionary

    Raises:
        The original exception if reraise is True
    """
    category = classifyError(error)
    context = context or {}

    errorDetails = {
        'type': type(error).__name__,
        'code': getattr(error, 'code', None),
        'category': category.value,
        'message': str(error),
        'context': context,
        'traceback': traceback.format_exc()
    }

    if category == ErrorCategory.CONFIGURATION:
        logger.error(f"Configuration error: {error}")
    elif category == ErrorCategory.DATA:
        logger.warning(f"Data error: {error}")
    elif category == ErrorCategory.RETRYABLE:
        logger.warning(f"Upstream error: {error}")
    else:
        logger.error(f"Error: {error}", exc_info=True)

    if reraise:
        raise error

    return errorDetails


def formatError(error: Exception) -> str:
    """
    Format an error for display/logging.

    Args:
        error: Exception to format

    Returns:
        Formatted error string, e.g. "[DATA] VIN_INVALID: VIN must be 17 characters"
    """
    category = classifyError(error)

    if isinstance(error, BaseError):
        details = f" | details={error.details}" if error.details else ""
        return f"[{category.value.upper()}] {error.code}: {error.message}{details}"

    return f"[{category.value.upper()}] {type(error).__name__}: {error}"
