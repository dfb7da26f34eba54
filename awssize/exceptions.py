"""Error types raised by the size scale.

All errors inherit from AwsSizeError, which is itself a ValueError, so callers
can catch the whole family with a single except clause.

AwsSizeError
├── UnsupportedSizeClass
└── IncompatibleSizes
    ├── SizeTooSmall
    └── NonIntegerRatio
"""


class AwsSizeError(ValueError):
    """Base exception for all awssize errors."""


class UnsupportedSizeClass(AwsSizeError):
    """Raised when an instance class does not end in a known size name."""

    def __init__(self, instance_class: str, suffix: str):
        super().__init__(
            f"unsupported size class {instance_class!r} (suffix {suffix!r})"
        )
        self.instance_class = instance_class
        self.suffix = suffix


class IncompatibleSizes(AwsSizeError):
    """Raised when one size cannot be expressed as a whole multiple of another."""

    reason = "sizes are incompatible"

    def __init__(self, src, dst):
        super().__init__(f"{src} as {dst}: {self.reason}")
        self.src = src
        self.dst = dst


class SizeTooSmall(IncompatibleSizes):
    reason = "size is smaller than target"


class NonIntegerRatio(IncompatibleSizes):
    reason = "size cannot be expressed as non-fractional multiple of the target"
