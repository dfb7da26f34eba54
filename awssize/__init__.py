"""Convert between AWS instance sizes of the same family."""

from awssize.api import describe
from awssize.api import normalize
from awssize.api import size_scale
from awssize.exceptions import AwsSizeError
from awssize.exceptions import IncompatibleSizes
from awssize.exceptions import NonIntegerRatio
from awssize.exceptions import SizeTooSmall
from awssize.exceptions import UnsupportedSizeClass
from awssize.models.size import SIZE_SCALE
from awssize.models.size import Size
from awssize.models.size import parse
from awssize.models.size import ratio

__version__ = "0.1.0"

__all__ = [
    "AwsSizeError",
    "IncompatibleSizes",
    "NonIntegerRatio",
    "SIZE_SCALE",
    "Size",
    "SizeTooSmall",
    "UnsupportedSizeClass",
    "describe",
    "normalize",
    "parse",
    "ratio",
    "size_scale",
]
