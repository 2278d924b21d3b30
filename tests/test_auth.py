import pytest

from reqkit.auth import AuthMode, Authentication, EncodedAuthentication, ProxyAuthentication


def test_unicode_encoder():
    encoded = EncodedAuthentication("一二三", "Hello World!")
    assert encoded.auth_string == "%E4%B8%80%E4%BA%8C%E4%B8%89:Hello%20World%21"


def test_authentication_string_and_mode():
    auth = Authentication("user", "password", AuthMode.DIGEST)
    assert auth.auth_string == "user:password"
    assert auth.auth_mode is AuthMode.DIGEST


def test_authentication_default_mode_is_basic():
    assert Authentication("user", "password").auth_mode is AuthMode.BASIC


def test_authentication_repr_hides_password():
    assert "password" not in repr(Authentication("user", "password"))


def test_empty_encoded_authentication():
    assert EncodedAuthentication().auth_string == ""


def test_encoded_authentication_needs_both_parts():
    with pytest.raises(TypeError):
        EncodedAuthentication("user")


def test_proxy_authentication_lookup():
    proxy_auth = ProxyAuthentication({"http": EncodedAuthentication("user", "password")})
    assert proxy_auth.has("http")
    assert not proxy_auth.has("https")
    assert proxy_auth["http"] == "user:password"


def test_proxy_authentication_missing_protocol():
    proxy_auth = ProxyAuthentication()
    assert proxy_auth.has("https") is False
    with pytest.raises(KeyError):
        proxy_auth["https"]