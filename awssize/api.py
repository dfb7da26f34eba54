from typing import Any
from typing import Dict
from typing import List

from awssize.models.size import SIZE_SCALE
from awssize.models.size import parse
from awssize.models.size import ratio


def normalize(src_class: str, dst_class: str) -> int:
    """
    A high-level function to express one instance class as a number of another.

    Both arguments may be full instance classes ("db.r6g.2xlarge") or bare
    size names ("medium"). The caller is responsible for both belonging to
    the same instance family.

    :param src_class: The larger instance class.
    :param dst_class: The unit to express src_class in.
    :return: How many dst_class instances make up one src_class.
    """
    return ratio(parse(src_class), parse(dst_class))


def describe(src_class: str, dst_class: str) -> str:
    """Human readable form of normalize, e.g. "one 2xlarge equals 8 medium"."""
    src, dst = parse(src_class), parse(dst_class)
    return f"one {src} equals {ratio(src, dst)} {dst}"


def size_scale() -> List[Dict[str, Any]]:
    """The size scale as a list of dicts, smallest first."""
    return [{"name": name, "weight": weight} for name, weight in SIZE_SCALE]
