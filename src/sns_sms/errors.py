"""
Exceptions raised by :class:`sns_sms.sms.SmsSender`.

``MissingCredential`` and ``InvalidRegion`` are raised locally before any
network call. ``RemoteFailure`` wraps whatever botocore raised during the
publish call; the original exception is kept as ``__cause__``.
"""

from enum import Enum


class Credential(Enum):
    ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
    SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
    REGION = "AWS_REGION"
    ALL = "ALL"


_MISSING_MESSAGES = {
    Credential.ACCESS_KEY_ID: "AWS_ACCESS_KEY_ID env var is required.",
    Credential.SECRET_ACCESS_KEY: "AWS_SECRET_ACCESS_KEY env var is required.",
    Credential.REGION: "AWS_REGION env var is required.",
    Credential.ALL: (
        "AWS_SECRET_ACCESS_KEY, AWS_REGION, AWS_ACCESS_KEY_ID env var is required."
    ),
}


class SmsError(Exception):
    """Base class for every error raised by this package."""


class MissingCredential(SmsError):
    def __init__(self, credential: Credential):
        self.credential = credential
        super().__init__(_MISSING_MESSAGES[credential])


class InvalidRegion(SmsError):
    def __init__(self, region: str, reason: str = ""):
        self.region = region
        msg = f"Invalid AWS region '{region}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class RemoteFailure(SmsError):
    """The SNS publish call failed (network, auth, throttling, rejection)."""
