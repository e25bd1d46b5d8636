import pytest

from sns_sms.errors import Credential, MissingCredential
from sns_sms.utils.credentials import env_provider, get_region, verify_credentials

KEY = "AKIAEXAMPLE"
SECRET = "secret"
REGION = "us-east-1"


def _provider(access_key=None, secret_key=None, region=None):
    values = {
        "AWS_ACCESS_KEY_ID": access_key,
        "AWS_SECRET_ACCESS_KEY": secret_key,
        "AWS_REGION": region,
    }
    return values.get


def _check(provider):
    """Run both checks in the order SmsSender.send does."""
    verify_credentials(provider)
    get_region(provider)


@pytest.mark.parametrize(
    "access_key, secret_key, region, expected",
    [
        (KEY, None, REGION, Credential.SECRET_ACCESS_KEY),
        (None, SECRET, REGION, Credential.ACCESS_KEY_ID),
        (None, None, REGION, Credential.ALL),
        (KEY, SECRET, None, Credential.REGION),
        # key pair errors win over a missing region
        (KEY, None, None, Credential.SECRET_ACCESS_KEY),
        (None, SECRET, None, Credential.ACCESS_KEY_ID),
        (None, None, None, Credential.ALL),
    ],
)
def test_tie_break_table(access_key, secret_key, region, expected):
    with pytest.raises(MissingCredential) as exc:
        _check(_provider(access_key, secret_key, region))
    assert exc.value.credential is expected


def test_all_present():
    provider = _provider(KEY, SECRET, REGION)
    assert verify_credentials(provider) == (KEY, SECRET)
    assert get_region(provider) == REGION


def test_empty_string_counts_as_missing():
    with pytest.raises(MissingCredential) as exc:
        verify_credentials(_provider(KEY, "", REGION))
    assert exc.value.credential is Credential.SECRET_ACCESS_KEY


@pytest.mark.parametrize(
    "credential, message",
    [
        (Credential.ACCESS_KEY_ID, "AWS_ACCESS_KEY_ID env var is required."),
        (Credential.SECRET_ACCESS_KEY, "AWS_SECRET_ACCESS_KEY env var is required."),
        (Credential.REGION, "AWS_REGION env var is required."),
        (
            Credential.ALL,
            "AWS_SECRET_ACCESS_KEY, AWS_REGION, AWS_ACCESS_KEY_ID env var is required.",
        ),
    ],
)
def test_error_messages(credential, message):
    assert str(MissingCredential(credential)) == message


def test_env_provider_reads_process_environment(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", KEY)
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", SECRET)
    monkeypatch.delenv("AWS_REGION", raising=False)

    assert verify_credentials(env_provider) == (KEY, SECRET)
    with pytest.raises(MissingCredential):
        get_region(env_provider)
