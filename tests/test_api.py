import pytest

from awssize import SizeTooSmall
from awssize import UnsupportedSizeClass
from awssize.api import describe
from awssize.api import normalize
from awssize.api import size_scale


def test_normalize():
    assert normalize("db.r6g.2xlarge", "db.r6g.medium") == 8
    assert normalize("2xlarge", "2xlarge") == 1


def test_normalize_propagates_errors():
    with pytest.raises(SizeTooSmall):
        normalize("medium", "large")
    with pytest.raises(UnsupportedSizeClass):
        normalize("foo.bar.unknownsize", "large")


def test_describe():
    assert describe("2xlarge", "medium") == "one 2xlarge equals 8 medium"
    assert describe("2xlarge", "2xlarge") == "one 2xlarge equals 1 2xlarge"


def test_size_scale():
    scale = size_scale()
    assert len(scale) == 18
    assert scale[0] == {"name": "nano", "weight": 1}
    assert scale[-1] == {"name": "48xlarge", "weight": 1536}
