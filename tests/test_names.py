import pytest

from biserial.core.errors import InvalidArgumentError
from biserial.core.names import DEFAULT_NORMALIZATION, Normalization


def test_default_is_unbiased():
    assert DEFAULT_NORMALIZATION is Normalization.UNBIASED


def test_coerce_accepts_members_and_strings():
    assert Normalization.coerce(Normalization.BIASED) is Normalization.BIASED
    assert Normalization.coerce("uncorrected") is Normalization.UNCORRECTED


def test_coerce_rejects_unknown():
    with pytest.raises(InvalidArgumentError, match="Unknown normalization"):
        Normalization.coerce("sample")


def test_divisor_offsets():
    assert [m.divisor_offset for m in Normalization] == [-1, 0, 1]
