################################################################################
# File Name: http_client.py
# Purpose/Description: JSON-over-HTTP fetch used by the decoding providers
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial implementation
# ================================================================================
################################################################################

"""
HTTP fetch module.

Provides the single capability the provider adapters need: GET a URL and
return its JSON body. Transport and parse failures are raised as VinApiError
so the decoder can downgrade them to "no result from this provider".

Usage:
    client = JsonHttpClient(timeoutSeconds=30)
    payload = client.fetchJson('https://vpic.nhtsa.dot.gov/api/...')
"""

import json
import logging
import threading
from collections.abc import Callable
from typing import Any

import requests

from .exceptions import VinApiError, VinApiTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_API_TIMEOUT = 30

USER_AGENT = 'Fleet VIN Decoder/1.0'

FetchJson = Callable[[str], Any]


class JsonHttpClient:
    """
    Minimal GET-and-parse JSON client.

    Non-2xx responses are not errors by themselves: providers answer unknown
    VINs with a JSON body describing the problem, and the adapters decide
    whether it carries anything useful.

    requests does not guarantee a Session is thread-safe, so unless a session
    is injected each calling thread gets its own.

    Attributes:
        timeoutSeconds: Per-request timeout
    """

    def __init__(
        self,
        timeoutSeconds: float = DEFAULT_API_TIMEOUT,
        session: requests.Session | None = None
    ):
        self.timeoutSeconds = timeoutSeconds
        self._injectedSession = self._prepareSession(session) if session is not None else None
        self._threadState = threading.local()

    @property
    def session(self) -> requests.Session:
        """requests session for the calling thread (the injected one if given)."""
        if self._injectedSession is not None:
            return self._injectedSession

        session = getattr(self._threadState, 'session', None)
        if session is None:
            session = self._prepareSession(requests.Session())
            self._threadState.session = session
            logger.debug(f"Created HTTP session for thread {threading.current_thread().name}")
        return session

    @staticmethod
    def _prepareSession(session: requests.Session) -> requests.Session:
        session.headers.update({
            'User-Agent': USER_AGENT,
            'Accept': 'application/json',
        })
        return session

    def fetchJson(self, url: str) -> Any:
        """
        GET a URL and decode its JSON body.

        Args:
            url: Fully built request URL

        Returns:
            Parsed JSON ({} for an empty body)

        Raises:
            VinApiTimeoutError: If the request timed out
            VinApiError: On connection failure or a non-JSON body
        """
        try:
            response = self.session.get(url, timeout=self.timeoutSeconds)
        except requests.Timeout as e:
            raise VinApiTimeoutError(
                f"API request timed out after {self.timeoutSeconds}s",
                details={'timeout': self.timeoutSeconds}
            ) from e
        except requests.RequestException as e:
            raise VinApiError(
                f"Request failed: {e}",
                details={'error': type(e).__name__}
            ) from e

        if not response.ok:
            logger.warning(f"Provider responded with HTTP {response.status_code}")

        body = response.text
        if not body or not body.strip():
            return {}

        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise VinApiError(
                f"Invalid JSON response: {e}",
                details={'statusCode': response.status_code}
            ) from e
