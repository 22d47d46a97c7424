import jwt
import pytest

from src.core.models import AuthClaims
from src.exchanges.errors import ConfigurationError
from src.exchanges.upbit_auth import build_auth_headers, build_claims, sign_claims

SECRET_KEY = "unit-test-secret-key-with-enough-length-for-hs256"


def test_build_claims_uses_access_key():
    claims = build_claims("my-access-key")
    assert isinstance(claims, AuthClaims)
    assert claims.access_key == "my-access-key"
    assert claims.nonce


def test_nonces_are_unique_in_quick_succession():
    nonces = {build_claims("same-key").nonce for _ in range(100)}
    assert len(nonces) == 100


def test_sign_claims_produces_hs256_jwt():
    claims = AuthClaims(access_key="ak", nonce="n-1")
    token = sign_claims(claims, SECRET_KEY)

    assert jwt.get_unverified_header(token)["alg"] == "HS256"
    assert jwt.decode(token, SECRET_KEY, algorithms=["HS256"]) == {"access_key": "ak", "nonce": "n-1"}


def test_sign_claims_requires_secret():
    with pytest.raises(ConfigurationError):
        sign_claims(AuthClaims(access_key="ak", nonce="n"), "")


def test_auth_headers():
    headers = build_auth_headers("ak", SECRET_KEY)
    assert headers["Accept"] == "application/json"
    assert headers["Authorization"].startswith("Bearer ")


def test_auth_headers_differ_per_call():
    first = build_auth_headers("ak", SECRET_KEY)
    second = build_auth_headers("ak", SECRET_KEY)
    assert first["Authorization"] != second["Authorization"]


@pytest.mark.parametrize("access_key, secret_key", [
    (None, SECRET_KEY),
    ("ak", None),
    ("", ""),
])
def test_auth_headers_missing_credentials(access_key, secret_key):
    with pytest.raises(ConfigurationError):
        build_auth_headers(access_key, secret_key)
