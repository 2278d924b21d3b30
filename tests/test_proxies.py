import pytest

from reqkit.proxies import Proxies


def test_lookup():
    proxies = Proxies({"http": "http://bad_host/"})
    assert proxies.has("http")
    assert proxies["http"] == "http://bad_host/"


def test_missing_protocol():
    proxies = Proxies({"http": "http://bad_host/"})
    assert not proxies.has("https")
    with pytest.raises(KeyError):
        proxies["https"]


def test_from_pairs():
    proxies = Proxies([("http", "http://a/"), ("https", "http://b/")])
    assert proxies.has("https")
    assert proxies["https"] == "http://b/"


def test_empty():
    assert not Proxies().has("http")