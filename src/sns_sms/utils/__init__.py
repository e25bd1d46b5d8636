"""
SNS SMS Utilities
=================

Shared helper modules for the SNS SMS sender:

- logger.py       → structured JSON logging
- credentials.py  → AWS credential/region lookup and presence checks
- sns_client.py   → region validation and boto3 SNS client builder

All functions in this package are stateless and thread-safe.
"""

from sns_sms.utils.logger import get_logger, mask_phone

__all__ = [
    "get_logger",
    "mask_phone",
]
