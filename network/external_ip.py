"""Public IPv4 lookup.

Queries ipinfo.io for the address clients should dial. Shown in the
summary only; a failed lookup never affects provisioning.
"""

import json
import time
from typing import Any

import requests

import config
from logging_config import get_logger
from utils import is_valid_ipv4

logger = get_logger(__name__)


def get_public_ipv4() -> str | None:
    """Query the public IPv4 address of this host.

    3 attempts, exponential backoff, 10 second timeout.

    Returns:
        IPv4 address string or None on failure.
    """
    logger.debug("Querying public IPv4...")
    response = get_with_retry(config.IPINFO_URL, config.TIMEOUT_SECONDS)
    if not response:
        logger.warning("Public IPv4 lookup failed after %d attempts", config.RETRY_ATTEMPTS)
        return None

    try:
        data = response.json()
    except json.JSONDecodeError:
        logger.warning("Invalid JSON from ipinfo.io")
        return None

    if not validate_api_response(data):
        return None

    return data["ip"]


def get_with_retry(url: str, timeout: int) -> requests.Response | None:
    """Request with exponential backoff retry.

    Args:
        url: URL to request
        timeout: Request timeout in seconds

    Returns:
        Response object or None if all attempts fail.
    """
    for attempt in range(config.RETRY_ATTEMPTS):
        try:
            response = requests.get(url, timeout=timeout)
            response.raise_for_status()
            return response
        except requests.RequestException as e:
            if attempt < config.RETRY_ATTEMPTS - 1:
                sleep_time = config.RETRY_BACKOFF_FACTOR * (2**attempt)
                logger.debug("Request attempt %d failed, retrying in %ds", attempt + 1, sleep_time)
                time.sleep(sleep_time)
            else:
                logger.debug(
                    "Request failed after %d attempts: %s",
                    config.RETRY_ATTEMPTS,
                    str(e),
                )
    return None


def validate_api_response(data: Any) -> bool:
    """Check that the response carries a valid IPv4 "ip" field.

    Args:
        data: Decoded JSON response

    Returns:
        True if usable, False otherwise.
    """
    if not isinstance(data, dict):
        logger.warning("Unexpected API response type: %s", type(data).__name__)
        return False

    if not is_valid_ipv4(data.get("ip")):
        logger.warning("API response missing valid IPv4 address")
        return False

    return True
