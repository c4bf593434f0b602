################################################################################
# File Name: handler.py
# Purpose/Description: Maps decode requests and errors to HTTP responses
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
Decode request handler module.

Framework-neutral mapping of GET /api/vin/decode?vin=... onto the decoder.
The web layer passes the query parameters and writes back the returned
status code and JSON body. Authentication runs before this handler.

Responses:
    200  decoded record
    400  {message, field: 'vin', code: 'VIN_REQUIRED' | 'VIN_INVALID'}
    404  {message, field: 'vin', code: 'VIN_NOT_FOUND'}
    500  {message: 'Failed to decode VIN', error}
"""

import logging
from collections.abc import Mapping
from typing import Any

from common.error_handler import handleError

from .decoder import VinDecoder
from .exceptions import VinNotFoundError, VinRequiredError, VinValidationError

logger = logging.getLogger(__name__)

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_SERVER_ERROR = 500

VIN_QUERY_PARAM = 'vin'


def _fieldError(message: str, code: str) -> dict[str, Any]:
    return {'message': message, 'field': VIN_QUERY_PARAM, 'code': code}


def handleDecodeRequest(
    query: Mapping[str, Any] | None,
    decoder: VinDecoder
) -> tuple[int, dict[str, Any]]:
    """
    Decode the VIN of a request and build the response.

    Args:
        query: Request query parameters
        decoder: Configured VinDecoder

    Returns:
        Tuple of (HTTP status code, JSON-serializable body)
    """
    rawVin = (query or {}).get(VIN_QUERY_PARAM)

    try:
        vehicle = decoder.decodeVin(rawVin)
    except VinRequiredError as e:
        return HTTP_BAD_REQUEST, _fieldError("VIN is required", e.code)
    except VinValidationError as e:
        return HTTP_BAD_REQUEST, _fieldError("VIN must be 17 characters", e.code)
    except VinNotFoundError as e:
        return HTTP_NOT_FOUND, _fieldError("VIN not found", e.code)
    except Exception as e:
        handleError(e, context={'vin': rawVin}, reraise=False)
        return HTTP_SERVER_ERROR, {'message': "Failed to decode VIN", 'error': str(e)}

    return HTTP_OK, vehicle.toDict()
