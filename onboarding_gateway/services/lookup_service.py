"""
Phone number intelligence through Twilio Lookup v2.

See: https://www.twilio.com/docs/lookup/v2-api
"""

import logging
from typing import Iterable, Optional

from twilio.base.exceptions import TwilioRestException
from twilio.rest import Client

from onboarding_gateway.core.error_mapping import map_provider_error
from onboarding_gateway.core.models import LookupField, MULTIPLE_LOOKUP_FIELDS, PhoneLookup

logger = logging.getLogger(__name__)


class PhoneLookupService:
    """Fetches phone number details and data packages from Twilio Lookup."""

    def __init__(self, client: Client):
        """
        Initialize the lookup service.

        Args:
            client: Authenticated Twilio client
        """
        self.client = client

    def _fetch(
        self,
        phone: str,
        fields: Optional[Iterable[LookupField]] = None,
        country_code: Optional[str] = None
    ) -> PhoneLookup:
        """
        Fetch a phone number resource, optionally with data packages.

        Raises:
            ProviderError: If Twilio rejects the request
        """
        options = {}
        if fields:
            options["fields"] = ",".join(field.value for field in fields)
        if country_code:
            options["country_code"] = country_code

        try:
            resource = self.client.lookups.v2.phone_numbers(phone).fetch(**options)
        except TwilioRestException as e:
            error = map_provider_error(e, keep_provider_message=True)
            logger.warning(
                "Lookup failed for %s (code=%s, status=%s): %s",
                phone, error.code, error.status_code, error.message
            )
            raise error

        return PhoneLookup.from_resource(resource)

    def lookup(self, phone: str, country_code: Optional[str] = None) -> PhoneLookup:
        """
        Basic lookup: validity and formatting only.

        Args:
            phone: Phone number in E.164 or national format
            country_code: ISO country used to parse national numbers

        Returns:
            Lookup result
        """
        return self._fetch(phone, country_code=country_code)

    def lookup_line_type(self, phone: str) -> PhoneLookup:
        """Lookup with line type intelligence (mobile, landline, voip, ...)."""
        return self._fetch(phone, fields=[LookupField.LINE_TYPE_INTELLIGENCE])

    def lookup_sms_pumping(self, phone: str) -> PhoneLookup:
        """Lookup with the SMS pumping fraud risk score."""
        return self._fetch(phone, fields=[LookupField.SMS_PUMPING_RISK])

    def lookup_multiple(self, phone: str) -> PhoneLookup:
        """Lookup with every generally available data package."""
        return self._fetch(phone, fields=MULTIPLE_LOOKUP_FIELDS)
