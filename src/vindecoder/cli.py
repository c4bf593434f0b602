################################################################################
# File Name: cli.py
# Purpose/Description: Command-line entry point for decoding a VIN
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
VIN decoder command-line interface.

Decodes one VIN with the configured providers and prints the decoded record
as JSON on stdout. Logs go to stderr.

Usage:
    vin-decode 1M8GDM9AXKP042788
    vin-decode 1M8GDM9AXKP042788 --provider nhtsa
    vin-decode 1M8GDM9AXKP042788 --env-file .env --verbose
    vin-decode 1M8GDM9AXKP042788 --summary
"""

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any

from common.error_handler import formatError, handleError
from common.logging_config import getLogger, setupLogging

from .config import loadDecoderConfig
from .decoder import VinDecoder
from .exceptions import (
    VinApiError,
    VinConfigurationError,
    VinNotFoundError,
    VinRequiredError,
    VinValidationError,
)

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_INVALID_VIN = 2
EXIT_NOT_FOUND = 3
EXIT_DECODE_ERROR = 4

DEFAULT_ENV = '.env'


def parseArgs(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (sys.argv[1:] when None)

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='vin-decode',
        description='Decode a truck VIN through the configured providers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  vin-decode 1M8GDM9AXKP042788                    Decode with the configured providers
  vin-decode 1M8GDM9AXKP042788 --provider nhtsa   Use NHTSA only
  vin-decode 1M8GDM9AXKP042788 --summary          Print a one-line summary
        '''
    )

    parser.add_argument('vin', help='Vehicle Identification Number to decode')

    parser.add_argument(
        '--config', '-c',
        default=None,
        help='Path to configuration file (default: packaged vin_decoder_config.json)'
    )

    parser.add_argument(
        '--env-file', '-e',
        default=DEFAULT_ENV,
        help='Path to environment file (default: .env)'
    )

    parser.add_argument(
        '--provider', '-p',
        default=None,
        help='Override provider selection: nhtsa, vincario, or auto'
    )

    parser.add_argument(
        '--summary',
        action='store_true',
        help='Print a one-line vehicle summary instead of JSON'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (debug) logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s 1.0.0'
    )

    return parser.parse_args(argv)


def applyLoggingConfig(config: dict[str, Any], verbose: bool) -> None:
    """
    Reconfigure logging from the loaded configuration.

    Args:
        config: Validated configuration with a 'logging' section
        verbose: --verbose flag, forces DEBUG over the configured level
    """
    loggingConfig = config.get('logging') or {}
    setupLogging(
        level='DEBUG' if verbose else (loggingConfig.get('level') or 'INFO'),
        logFile=loggingConfig.get('file')
    )


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point.

    Args:
        argv: Argument list (sys.argv[1:] when None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parseArgs(argv)

    # Bootstrap logging so configuration errors are reported
    setupLogging(level='DEBUG' if args.verbose else 'WARNING')
    logger = getLogger(__name__)

    try:
        config = loadDecoderConfig(args.config, args.env_file)
        applyLoggingConfig(config, args.verbose)

        if args.provider is not None:
            config['vinDecoder']['provider'] = args.provider

        vehicle = VinDecoder(config).decodeVin(args.vin)

    except VinConfigurationError as e:
        logger.error(formatError(e))
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except (VinRequiredError, VinValidationError) as e:
        print(f"{e.code}: {e}", file=sys.stderr)
        return EXIT_INVALID_VIN

    except VinNotFoundError as e:
        print(f"{e.code}: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND

    except VinApiError as e:
        logger.error(formatError(e))
        print(f"{e.code}: {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR

    except Exception as e:
        handleError(e, reraise=False)
        print(f"Failed to decode VIN: {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR

    if args.summary:
        print(vehicle.getVehicleSummary())
    else:
        print(json.dumps(vehicle.toDict(), indent=2))

    return EXIT_SUCCESS


if __name__ == '__main__':
    sys.exit(main())
