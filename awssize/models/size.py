"""Instance size scale.

This module maps size names used as suffixes of instance classes
("db.r6g.large", "r5.2xlarge") onto one ordered numeric axis:
- Size: the scale itself, one member per known size name
- SIZE_SCALE: (name, weight) pairs in canonical order
- parse: instance class or bare size name to Size
- ratio: how many of one size make up another

Weights only make sense for sizes of the same family; nothing here checks that.
"""
import logging
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping
from typing import Tuple
from typing import Union

from awssize.exceptions import NonIntegerRatio
from awssize.exceptions import SizeTooSmall
from awssize.exceptions import UnsupportedSizeClass
from awssize.utils.conversions import size_suffix

logger = logging.getLogger(__name__)


class Size(IntEnum):
    """
    AWS instance class size, like "medium" or "large".

    Members compare with the regular comparison operators. Use Size.ratio to
    step down from a larger size to a multiple of a smaller one.
    """

    NANO = 1
    MICRO = 2
    SMALL = 4
    MEDIUM = 8
    LARGE = 16
    XLARGE = 32
    XLARGE_2 = 64
    # Nxlarge tiers from here on are N * XLARGE, not doublings.
    XLARGE_3 = 96
    XLARGE_4 = 128
    XLARGE_8 = 256
    XLARGE_9 = 288
    XLARGE_10 = 320
    XLARGE_12 = 384
    XLARGE_16 = 512
    XLARGE_18 = 576
    XLARGE_24 = 768
    XLARGE_32 = 1024
    XLARGE_48 = 1536

    @property
    def label(self) -> str:
        """Canonical size name, e.g. "xlarge" or "2xlarge"."""
        base, _, multiplier = self.name.partition("_")
        return f"{multiplier}{base.lower()}"

    def __str__(self) -> str:
        return self.label

    def __format__(self, format_spec: str) -> str:
        return format(self.label, format_spec)

    @classmethod
    def parse(cls, instance_class: str) -> "Size":
        return parse(instance_class)

    def ratio(self, dst: "Size") -> int:
        return ratio(self, dst)


SIZE_SCALE: Tuple[Tuple[str, int], ...] = tuple(
    (size.label, size.value) for size in Size
)

_NAME_TO_SIZE: Mapping[str, Size] = MappingProxyType(
    {size.label: size for size in Size}
)


def parse(instance_class: str) -> Size:
    """
    Takes either an instance class, like "db.r6g.large" or "r5.large", or a
    bare size name, like "large", and returns its Size.

    :raises UnsupportedSizeClass: if the suffix is not a known size name.
    """
    suffix = size_suffix(instance_class)
    try:
        return _NAME_TO_SIZE[suffix]
    except KeyError:
        logger.debug(f"No size named {suffix!r} in {instance_class!r}")
        raise UnsupportedSizeClass(instance_class, suffix) from None


def _as_size(value: Union[Size, int]) -> Size:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"size must be a Size or int weight, got {type(value).__name__}"
        )
    return Size(value)


def ratio(src: Union[Size, int], dst: Union[Size, int]) -> int:
    """
    Returns how many dst make up one src.

    It is recommended to use the smallest size within the family as dst.

    :raises SizeTooSmall: if src is smaller than dst.
    :raises NonIntegerRatio: if src is not a whole multiple of dst.
    :raises TypeError: if src or dst is neither a Size nor an int weight.
    """
    src, dst = _as_size(src), _as_size(dst)
    if src < dst:
        logger.debug(f"Cannot express {src} as {dst}: smaller than target")
        raise SizeTooSmall(src, dst)
    if src % dst != 0:
        logger.debug(f"Cannot express {src} as {dst}: fractional multiple")
        raise NonIntegerRatio(src, dst)
    return int(src // dst)
