import os
from typing import Callable, Optional, Tuple

from sns_sms.errors import Credential, MissingCredential

# Anything that maps an environment variable name to its value (or None).
CredentialProvider = Callable[[str], Optional[str]]


def env_provider(name: str) -> Optional[str]:
    return os.environ.get(name)


def _lookup(provider: CredentialProvider, credential: Credential) -> Optional[str]:
    # Empty strings count as unset.
    return provider(credential.value) or None


def verify_credentials(provider: CredentialProvider = env_provider) -> Tuple[str, str]:
    """
    Check that both halves of the AWS key pair are available.

    Returns (access_key_id, secret_access_key). Raises MissingCredential
    naming the missing half, or Credential.ALL when neither is set. The
    region is not looked at here; see get_region().
    """
    access_key = _lookup(provider, Credential.ACCESS_KEY_ID)
    secret_key = _lookup(provider, Credential.SECRET_ACCESS_KEY)

    if access_key and secret_key:
        return access_key, secret_key
    if access_key:
        raise MissingCredential(Credential.SECRET_ACCESS_KEY)
    if secret_key:
        raise MissingCredential(Credential.ACCESS_KEY_ID)
    raise MissingCredential(Credential.ALL)


def get_region(provider: CredentialProvider = env_provider) -> str:
    region = _lookup(provider, Credential.REGION)
    if region is None:
        raise MissingCredential(Credential.REGION)
    return region
