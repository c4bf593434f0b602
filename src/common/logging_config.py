################################################################################
# File Name: logging_config.py
# Purpose/Description: Logging configuration with credential masking
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Mask registered provider credentials
# ================================================================================
################################################################################

"""
Logging configuration module.

Provides structured logging with:
- Configurable log levels
- Console and file output
- Masking of registered secrets (provider API keys) in log messages
- Consistent pipe-delimited formatting

Usage:
    from common.logging_config import setupLogging, getLogger, registerSecret

    setupLogging(level='INFO')
    registerSecret(apiKey)
    logger = getLogger(__name__)
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Any

DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s | %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Values shorter than this are too ambiguous to mask safely
MIN_SECRET_LENGTH = 4

_registeredSecrets: set[str] = set()
_secretsLock = threading.Lock()


def registerSecret(value: str | None) -> None:
    """
    Register a secret value to be masked by SecretMaskingFilter.

    Args:
        value: Secret value (ignored when empty or very short)
    """
    if not value or len(value) < MIN_SECRET_LENGTH:
        return
    with _secretsLock:
        _registeredSecrets.add(value)


def clearSecrets() -> None:
    """Forget all registered secrets."""
    with _secretsLock:
        _registeredSecrets.clear()


def maskValue(value: str, showChars: int = 4) -> str:
    """
    Mask a value, keeping its first characters.

    Args:
        value: Value to mask
        showChars: Number of characters to keep

    Returns:
        Masked string (e.g., "secr***")
    """
    if not value:
        return '[EMPTY]'

    if len(value) <= showChars:
        return '*' * len(value)

    return value[:showChars] + '*' * (len(value) - showChars)


class SecretMaskingFilter(logging.Filter):
    """
    Logging filter that masks registered secrets in log messages.

    Provider URLs carry credentials in their path, so any message that
    echoes a URL would otherwise leak them.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Mask secrets in the log record.

        Args:
            record: Log record to filter

        Returns:
            True (always allows record, but modifies it)
        """
        with _secretsLock:
            secrets = sorted(_registeredSecrets, key=len, reverse=True)

        if not secrets:
            return True

        message = record.getMessage()
        masked = message
        for secret in secrets:
            masked = masked.replace(secret, maskValue(secret))

        if masked != message:
            record.msg = masked
            record.args = None

        return True


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter for structured logging.

    Adds support for extra fields in log output.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        extra = getattr(record, 'extra', None)
        if extra and isinstance(extra, dict):
            extraStr = ' | ' + ' '.join(f'{k}={v}' for k, v in extra.items())
            message += extraStr

        return message


def setupLogging(
    level: str = 'INFO',
    logFormat: str | None = None,
    logFile: str | None = None,
    enableSecretMasking: bool = True
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        logFormat: Custom format string
        logFile: Optional file path for log output
        enableSecretMasking: Whether to mask registered secrets in logs

    Returns:
        Root logger instance
    """
    rootLogger = logging.getLogger()
    rootLogger.setLevel(getattr(logging, level.upper(), logging.INFO))

    rootLogger.handlers.clear()

    formatter = StructuredFormatter(
        fmt=logFormat or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )

    consoleHandler = logging.StreamHandler(sys.stderr)
    consoleHandler.setFormatter(formatter)
    if enableSecretMasking:
        consoleHandler.addFilter(SecretMaskingFilter())
    rootLogger.addHandler(consoleHandler)

    if logFile:
        logPath = Path(logFile)
        logPath.parent.mkdir(parents=True, exist_ok=True)

        fileHandler = logging.FileHandler(logFile, encoding='utf-8')
        fileHandler.setFormatter(formatter)
        if enableSecretMasking:
            fileHandler.addFilter(SecretMaskingFilter())
        rootLogger.addHandler(fileHandler)

    rootLogger.debug(f"Logging configured | level={level}")

    return rootLogger


def getLogger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def logWithContext(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any
) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level
        message: Log message
        **context: Additional context fields
    """
    logFunc = getattr(logger, level.lower(), logger.info)

    if context:
        contextStr = ' | ' + ' | '.join(f'{k}={v}' for k, v in context.items())
        logFunc(message + contextStr)
    else:
        logFunc(message)
