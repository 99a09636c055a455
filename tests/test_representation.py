import pytest

from ordinals.representation import Representation

HASH = "0123456789abcdef" * 4


def test_all_patterns_are_anchored():
    assert all(r.pattern.startswith("^") and r.pattern.endswith("$") for r in Representation)
    assert Representation.detect(HASH) is Representation.HASH
    for text in ("x" + HASH, HASH + "x", "x" + HASH + ":1", HASH + ":1x"):
        with pytest.raises(ValueError, match="unrecognized object"):
            Representation.detect(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4", Representation.ADDRESS),
        ("1.1", Representation.DECIMAL),
        ("1°0′0″0‴", Representation.DEGREE),
        ("0123456789abcdef" * 4, Representation.HASH),
        ("0123456789abcdef" * 4 + "i1", Representation.INSCRIPTION_ID),
        ("0", Representation.INTEGER),
        ("nvtdijuwxlp", Representation.NAME),
        ("0123456789abcdef" * 4 + ":123", Representation.OUT_POINT),
        ("0%", Representation.PERCENTILE),
        ("0123456789abcdef" * 4 + ":123:456", Representation.SAT_POINT),
    ],
)
def test_detect(text, expected):
    assert Representation.detect(text) is expected


def test_unrecognized():
    with pytest.raises(ValueError, match="unrecognized object"):
        Representation.detect("ABC")