import pytest

from reqkit.cookies import Cookies


def test_construct_from_mapping():
    cookies = Cookies({"hello": "world", "my": "another; fake=cookie;"})
    assert cookies["hello"] == "world"
    assert cookies["my"] == "another; fake=cookie;"
    assert len(cookies) == 2


def test_construct_from_pairs_and_iterate_sorted():
    cookies = Cookies([("icecream", "vanilla"), ("cookie", "chocolate")])
    assert list(cookies) == ["cookie", "icecream"]


def test_encode_flag():
    assert Cookies().encode is True
    assert Cookies(encode=False).encode is False
    assert Cookies({"a": "b"}, encode=False).encode is False


def test_set_and_delete():
    cookies = Cookies()
    cookies["hello"] = "world"
    assert dict(cookies) == {"hello": "world"}
    del cookies["hello"]
    assert len(cookies) == 0
    with pytest.raises(KeyError):
        cookies["hello"]


def test_overwrite_value():
    cookies = Cookies({"cookie": "chocolate"})
    cookies["cookie"] = "\"value with spaces (v1 cookie)\""
    assert cookies["cookie"] == "\"value with spaces (v1 cookie)\""
    assert len(cookies) == 1