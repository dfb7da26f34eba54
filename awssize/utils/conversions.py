"""String conversion helpers for instance class names."""


def size_suffix(instance_class: str) -> str:
    """
    Returns the segment after the last '.' of an instance class.

    "db.r6g.large" -> "large", "large" -> "large". No trimming or case folding
    is applied.
    """
    if not isinstance(instance_class, str):
        raise TypeError(
            f"instance class must be a str, got {type(instance_class).__name__}"
        )
    return instance_class.rpartition(".")[2]
