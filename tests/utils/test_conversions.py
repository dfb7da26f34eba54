import pytest

from awssize.utils.conversions import size_suffix


@pytest.mark.parametrize(
    "instance_class,expected",
    [
        ("db.r6g.large", "large"),
        ("r5.2xlarge", "2xlarge"),
        ("large", "large"),
        ("cache.t3.", ""),
        ("", ""),
        ("DB.R6G.Large", "Large"),
    ],
)
def test_size_suffix(instance_class, expected):
    assert size_suffix(instance_class) == expected


def test_size_suffix_does_not_trim():
    assert size_suffix("db.r6g. large ") == " large "


def test_size_suffix_rejects_non_strings():
    with pytest.raises(TypeError):
        size_suffix(None)
