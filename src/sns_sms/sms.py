import asyncio
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Union

from botocore.exceptions import BotoCoreError, ClientError

from sns_sms.errors import RemoteFailure
from sns_sms.utils.credentials import (
    CredentialProvider,
    env_provider,
    get_region,
    verify_credentials,
)
from sns_sms.utils.logger import get_logger, mask_phone
from sns_sms.utils.sns_client import build_client

logger = get_logger("sms")

SENDER_ID_ATTR = "AWS.SNS.SMS.SenderID"
MAX_PRICE_ATTR = "AWS.SNS.SMS.MaxPrice"
SMS_TYPE_ATTR = "AWS.SNS.SMS.SMSType"

DEFAULT_MAX_PRICE = Decimal("0.01")


class SmsType(Enum):
    PROMOTIONAL = "promotional"
    TRANSACTIONAL = "transactional"

    @classmethod
    def parse(cls, value: str) -> "SmsType":
        """Accepts the wire string in any case, e.g. "Promotional"."""
        for sms_type, wire in SMS_TYPE_VALUES.items():
            if wire.lower() == value.strip().lower():
                return sms_type
        raise ValueError(f"Unsupported SMS type: {value!r}")


# Value sent as AWS.SNS.SMS.SMSType for each classification
SMS_TYPE_VALUES: Dict[SmsType, str] = {
    SmsType.PROMOTIONAL: "Promotional",
    SmsType.TRANSACTIONAL: "Transactional",
}

ClientFactory = Callable[[str, str, str], Any]


def _string_attr(value: str) -> Dict[str, str]:
    return {"DataType": "String", "StringValue": value}


@dataclass(frozen=True)
class PublishRequest:
    message: str
    phone_number: str
    attributes: Dict[str, Dict[str, str]]

    def to_params(self) -> Dict[str, Any]:
        """Keyword arguments for SNS.Client.publish (phone number, not topic)."""
        return {
            "Message": self.message,
            "PhoneNumber": self.phone_number,
            "MessageAttributes": self.attributes,
        }


@dataclass(frozen=True)
class SmsSender:
    """
    Sends single SMS messages through SNS Publish.

    Credentials are looked up through ``credentials`` on every send and are
    never stored. ``client_factory`` builds the SNS client for a send; tests
    replace it with a stub.
    """

    sms_type: SmsType = SmsType.TRANSACTIONAL
    sender_id: str = ""
    max_price: Union[Decimal, int, float, str] = DEFAULT_MAX_PRICE
    credentials: CredentialProvider = field(default=env_provider, repr=False, compare=False)
    client_factory: ClientFactory = field(default=build_client, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.max_price, Decimal):
            # str() first so 0.01 stays 0.01 rather than its binary expansion
            object.__setattr__(self, "max_price", Decimal(str(self.max_price)))

    def build_attributes(self) -> Dict[str, Dict[str, str]]:
        attrs: Dict[str, Dict[str, str]] = {}

        if self.sender_id:
            attrs[SENDER_ID_ATTR] = _string_attr(self.sender_id)

        attrs[MAX_PRICE_ATTR] = _string_attr(format(self.max_price, "f"))
        attrs[SMS_TYPE_ATTR] = _string_attr(SMS_TYPE_VALUES[self.sms_type])

        return attrs

    def build_request(self, message: str, phone_number: str) -> PublishRequest:
        return PublishRequest(
            message=message,
            phone_number=phone_number,
            attributes=self.build_attributes(),
        )

    async def send(self, message: str, phone_number: str) -> Dict[str, Any]:
        """
        Publish ``message`` to ``phone_number`` and return the SNS response.

        Raises:
            MissingCredential: a required AWS_* variable is unset. The key
                pair is checked before the region.
            InvalidRegion: AWS_REGION is not a usable SNS region.
            RemoteFailure: the publish call itself failed.
        """
        access_key_id, secret_access_key = verify_credentials(self.credentials)
        region = get_region(self.credentials)

        request = self.build_request(message, phone_number)
        client = self.client_factory(region, access_key_id, secret_access_key)

        try:
            response = await asyncio.to_thread(client.publish, **request.to_params())
        except (ClientError, BotoCoreError) as e:
            raise RemoteFailure(str(e)) from e

        logger.info(
            "sms.published",
            extra={
                "fields": {
                    "message_id": response.get("MessageId"),
                    "to": mask_phone(phone_number),
                    "sms_type": SMS_TYPE_VALUES[self.sms_type],
                    "region": region,
                }
            },
        )
        return response
