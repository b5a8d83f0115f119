import pickle

import pytest
from pydantic import ValidationError

from bic.errors import (
    BicError,
    InvalidBranch,
    InvalidCountry,
    InvalidLength,
    InvalidPrefix,
    InvalidSuffix,
)
from bic.models import Bic
from bic.serialize import dumps, from_json, loads, to_json


def test_pickle_round_trip():
    bic = pickle.loads(pickle.dumps(Bic("AAAABBCCXXX")))
    assert bic.canonical == "AAAABBCC"
    assert bic.original == "AAAABBCCXXX"


def test_pickle_stores_only_the_original():
    data = pickle.dumps(Bic("DEUTDEFF500"))
    assert data.count(b"DEUTDEFF500") == 1


def test_pickle_corruption_is_revalidated():
    data = pickle.dumps(Bic("AAAABBCCXXX"))
    tampered = data.replace(b"AAAABBCCXXX", b"AAAABBCCXX_")
    assert tampered != data
    with pytest.raises(InvalidBranch):
        pickle.loads(tampered)


def test_bytes_round_trip():
    for value in ("NTSBDEB1", "NTSBDEB1XXX", "DEUTDEFF500"):
        bic = Bic(value)
        raw = dumps(bic)
        assert raw == value.encode("ascii")
        assert loads(raw) == bic
        assert loads(raw).original == value


def test_loads_accepts_str_and_bytearray():
    assert loads("MARKDEFF") == Bic.bank_of_germany()
    assert loads(bytearray(b"MARKDEFF")) == Bic.bank_of_germany()


@pytest.mark.parametrize(
    "index, error",
    [(i, InvalidPrefix) for i in range(0, 4)]
    + [(i, InvalidCountry) for i in range(4, 6)]
    + [(i, InvalidSuffix) for i in range(6, 8)]
    + [(i, InvalidBranch) for i in range(8, 11)],
)
def test_corrupted_byte(index, error):
    raw = bytearray(dumps(Bic("AAAABBCCXXX")))
    raw[index] = ord("_")
    with pytest.raises(error):
        loads(bytes(raw))


def test_non_ascii_byte_is_a_content_error():
    with pytest.raises(InvalidBranch):
        loads(b"AAAABBCC\xffXX")
    with pytest.raises(BicError):
        loads(b"AAAA\xc3\x84BCC")


def test_json_round_trip():
    bic = Bic("NTSBDEB1XXX")
    assert to_json(bic) == '"NTSBDEB1XXX"'
    assert from_json(to_json(bic)).canonical == "NTSBDEB1"


def test_json_bad_code_raises_segment_error():
    with pytest.raises(InvalidPrefix):
        from_json('"aaaaBBCC"')
    with pytest.raises(InvalidBranch):
        from_json('"AAAABBCCddd"')
    with pytest.raises(InvalidLength):
        from_json(b'"AAAABBC"')


def test_json_bad_format_raises_validation_error():
    with pytest.raises(ValidationError):
        from_json('"AAAABBCC')
    with pytest.raises(ValidationError):
        from_json("12345678")


@pytest.mark.parametrize("raw", [8, None, ["AAAABBCC"]])
def test_loads_rejects_non_bytes(raw):
    with pytest.raises(TypeError):
        loads(raw)
