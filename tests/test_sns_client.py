import pytest
from botocore.exceptions import InvalidRegionError

from sns_sms.errors import InvalidRegion
from sns_sms.utils.sns_client import build_client, known_regions, parse_region


def test_known_regions_include_common_ones():
    regions = known_regions()
    assert "us-east-1" in regions
    assert "eu-west-1" in regions


@pytest.mark.parametrize("region", [" us-east-1 ", "US-EAST-1", "Us-East-1"])
def test_parse_region_normalises(region):
    assert parse_region(region) == "us-east-1"


@pytest.mark.parametrize("region", ["mars-north-1", "us east 1", " MARS-NORTH-1 "])
def test_parse_region_rejects_unknown(region):
    with pytest.raises(InvalidRegion) as exc:
        parse_region(region)
    assert exc.value.region == region.strip().lower()


def test_build_client_binds_region():
    # Client construction does not touch the network.
    client = build_client("eu-west-1", "AKIAEXAMPLE", "secret")
    assert client.meta.region_name == "eu-west-1"
    assert client.meta.service_model.service_name == "sns"


def test_build_client_invalid_region():
    with pytest.raises(InvalidRegion):
        build_client("mars-north-1", "AKIAEXAMPLE", "secret")


def test_build_client_accepts_upper_case_region():
    client = build_client("EU-WEST-1 ", "AKIAEXAMPLE", "secret")
    assert client.meta.region_name == "eu-west-1"


def test_build_client_reports_normalised_region():
    with pytest.raises(InvalidRegion) as exc:
        build_client("  Mars-North-1 ", "AKIAEXAMPLE", "secret")
    assert exc.value.region == "mars-north-1"


def test_build_client_wraps_botocore_region_error(monkeypatch):
    def fake_client(service_name, region_name, **kwargs):
        raise InvalidRegionError(region_name=region_name)

    monkeypatch.setattr("sns_sms.utils.sns_client.boto3.client", fake_client)

    with pytest.raises(InvalidRegion) as exc:
        build_client(" US-EAST-1", "AKIAEXAMPLE", "secret")

    assert exc.value.region == "us-east-1"
    assert isinstance(exc.value.__cause__, InvalidRegionError)
