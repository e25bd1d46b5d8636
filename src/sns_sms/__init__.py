"""
SNS SMS Sender
==============

Thin client for sending single SMS messages through the AWS SNS Publish API.

Modules under this package:
- sms.py      → SmsSender, SmsType, PublishRequest
- errors.py   → MissingCredential, InvalidRegion, RemoteFailure
- handler.py  → AWS Lambda entry point sending one SMS per invocation
- utils/      → Shared helpers (logging, credentials, SNS client)

Environment variables read at send time:
  • AWS_ACCESS_KEY_ID      - AWS access key id
  • AWS_SECRET_ACCESS_KEY  - AWS secret access key
  • AWS_REGION             - SNS region, e.g. us-east-1
  • LOG_LEVEL              - Log verbosity (default: INFO)
"""

from sns_sms.errors import (
    Credential,
    InvalidRegion,
    MissingCredential,
    RemoteFailure,
    SmsError,
)
from sns_sms.sms import PublishRequest, SmsSender, SmsType

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Credential",
    "InvalidRegion",
    "MissingCredential",
    "PublishRequest",
    "RemoteFailure",
    "SmsError",
    "SmsSender",
    "SmsType",
]
