################################################################################
# File Name: __init__.py
# Purpose/Description: Common utilities package initialization
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Exports for the VIN decoding service
# ================================================================================
################################################################################

"""
Common utilities package.

This package provides shared functionality used across the service:
- Configuration validation and loading
- Secrets management
- Logging configuration
- Error handling

Usage:
    from common.config_validator import ConfigValidator
    from common.secrets_loader import loadConfigWithSecrets
    from common.logging_config import getLogger
    from common.error_handler import BaseError
"""

from .config_validator import ConfigValidator
from .error_handler import (
    BaseError,
    ConfigurationError,
    DataError,
    ErrorCategory,
    RetryableError,
    classifyError,
    formatError,
    handleError,
)
from .logging_config import getLogger, logWithContext, registerSecret, setupLogging
from .secrets_loader import loadConfigWithSecrets, loadEnvFile, resolveSecrets

__all__ = [
    'ConfigValidator',
    'loadConfigWithSecrets',
    'loadEnvFile',
    'resolveSecrets',
    'getLogger',
    'logWithContext',
    'registerSecret',
    'setupLogging',
    'BaseError',
    'ErrorCategory',
    'RetryableError',
    'ConfigurationError',
    'DataError',
    'classifyError',
    'formatError',
    'handleError',
]
