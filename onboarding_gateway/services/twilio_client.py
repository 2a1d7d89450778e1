"""
Twilio REST client construction.
"""

import logging
from functools import lru_cache
from typing import Optional

from twilio.rest import Client

from onboarding_gateway.config import Settings, settings as default_settings
from onboarding_gateway.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_twilio_client(config: Optional[Settings] = None) -> Client:
    """
    Create a Twilio client from configuration.

    An API key pair is preferred; the account auth token is used otherwise.

    Args:
        config: Settings to read credentials from (defaults to global settings)

    Returns:
        Authenticated Twilio REST client

    Raises:
        ConfigurationError: If required credentials are missing
    """
    config = config or default_settings

    missing = config.missing_credentials()
    if missing:
        raise ConfigurationError(missing)

    if config.uses_api_key:
        logger.debug("Authenticating to Twilio with API key %s", config.twilio_api_key_sid)
        return Client(
            config.twilio_api_key_sid,
            config.twilio_api_key_secret,
            account_sid=config.twilio_account_sid,
        )

    return Client(config.twilio_account_sid, config.twilio_auth_token)


@lru_cache(maxsize=1)
def get_twilio_client() -> Client:
    """Shared Twilio client, created on first use."""
    return create_twilio_client()
