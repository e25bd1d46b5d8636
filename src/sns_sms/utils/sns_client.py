# utils/sns_client.py

from functools import lru_cache
from typing import Any, FrozenSet

import boto3
from botocore.exceptions import InvalidRegionError

from sns_sms.errors import InvalidRegion
from sns_sms.utils.logger import get_logger

logger = get_logger("sns_client")


@lru_cache(maxsize=1)
def known_regions() -> FrozenSet[str]:
    """
    Every region botocore knows SNS to be available in, across all
    partitions (aws, aws-cn, aws-us-gov, ...). Read from botocore's
    bundled endpoint data, so no network access is needed.
    """
    session = boto3.session.Session()
    regions = set()
    for partition in session.get_available_partitions():
        regions.update(session.get_available_regions("sns", partition_name=partition))
    return frozenset(regions)


def parse_region(region: str) -> str:
    """Normalise case and whitespace, then check against known_regions()."""
    region_name = region.strip().lower()
    if region_name not in known_regions():
        raise InvalidRegion(region_name, "not a known SNS region")
    return region_name


def build_client(region: str, access_key_id: str, secret_access_key: str) -> Any:
    """
    Build an SNS client bound to ``region`` using explicit credentials.

    Raises InvalidRegion if the region is unknown or botocore refuses it.
    """
    region_name = parse_region(region)

    try:
        client = boto3.client(
            "sns",
            region_name=region_name,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )
    except InvalidRegionError as e:
        raise InvalidRegion(region_name, str(e)) from e

    logger.debug(
        "sns_client.initialized",
        extra={"fields": {"region": region_name}},
    )
    return client
