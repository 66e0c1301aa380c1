import math
from dataclasses import dataclass

import pytest

from sigtoken.codec import decode_text, deserialize, encode_text, serialize
from sigtoken.errors import DecodingError, EncodingError, MalformedTokenError


@dataclass
class Account:
    account_id: str
    limits: dict


def test_serialize_is_canonical() -> None:
    a = {"user_id": 42, "meta": {"x": 1, "y": 2}}
    b = {"meta": {"y": 2, "x": 1}, "user_id": 42}
    assert serialize(a) == serialize(b) == b'{"meta":{"x":1,"y":2},"user_id":42}'


def test_serialize_keeps_unicode_as_utf8() -> None:
    assert serialize({"name": "Zoë"}) == '{"name":"Zoë"}'.encode("utf-8")


def test_serialize_dataclass() -> None:
    assert serialize(Account("acct_1", {"daily": 100})) == b'{"account_id":"acct_1","limits":{"daily":100}}'


@pytest.mark.parametrize("payload", [{1, 2}, object(), b"raw", {"value": math.nan}, {1: "a", "b": 2}])
def test_serialize_rejects_unsupported_values(payload) -> None:
    with pytest.raises(EncodingError):
        serialize(payload)


def test_serialize_rejects_cycles() -> None:
    payload: dict = {"name": "loop"}
    payload["self"] = payload
    with pytest.raises(EncodingError) as excinfo:
        serialize(payload)
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_deserialize_plain_and_typed() -> None:
    assert deserialize(b'{"user_id":42}') == {"user_id": 42}
    assert deserialize(b"[1,2]", list) == [1, 2]
    assert deserialize(b'{"account_id":"a","limits":{}}', Account) == Account("a", {})


def test_deserialize_does_not_treat_bool_as_int() -> None:
    assert deserialize(b"1", int) == 1
    assert deserialize(b"true", bool) is True
    with pytest.raises(DecodingError):
        deserialize(b"true", int)


@pytest.mark.parametrize(
    "data,payload_type",
    [
        (b"\xff\xfe", None),
        (b'{"user_id": 42', None),
        (b"", None),
        (b"[1,2]", dict),
        (b"[1,2]", Account),
        (b'{"account_id":"a"}', Account),
        (b'{"account_id":"a","limits":{},"extra":1}', Account),
    ],
)
def test_deserialize_rejects_shape_mismatch(data, payload_type) -> None:
    with pytest.raises(DecodingError):
        deserialize(data, payload_type)


def test_encode_text_is_url_safe_and_unpadded() -> None:
    encoded = encode_text(b"\xfb\xff\xfe")
    assert encoded == "-__-"
    assert encode_text(b'{"user_id":42}') == "eyJ1c2VyX2lkIjo0Mn0"
    assert "=" not in encode_text(b"a")


@pytest.mark.parametrize("data", [b"", b"a", b"ab", b"abc", bytes(range(256))])
def test_decode_text_inverts_encode_text(data) -> None:
    assert decode_text(encode_text(data)) == data


@pytest.mark.parametrize("segment", ["abc$", "ab+/", "abc=", "ab cd", "é", "abcde", "a"])
def test_decode_text_rejects_bad_segments(segment) -> None:
    with pytest.raises(MalformedTokenError):
        decode_text(segment)
