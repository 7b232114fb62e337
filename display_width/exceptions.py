"""Exceptions raised while building a width index."""


class IndexBuildError(ValueError):
    """Unicode property data could not be turned into a width index."""


class MalformedRangeError(IndexBuildError):
    """A range entry or property line is not a valid codepoint range."""

    def __init__(self, entry, reason: str) -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(f"malformed range {entry!r}: {reason}")


class OverlappingRangeError(IndexBuildError):
    """Two ranges of the same property cover a common codepoint."""

    def __init__(self, property_name: str, first, second) -> None:
        self.property_name = property_name
        self.first = first
        self.second = second
        super().__init__(
            f"overlapping {property_name} ranges {first!r} and {second!r}")


class UnknownCategoryError(IndexBuildError):
    """A property value is not one of the codes defined by Unicode."""

    def __init__(self, property_name: str, code, entry) -> None:
        self.property_name = property_name
        self.code = code
        self.entry = entry
        super().__init__(
            f"unknown {property_name} code {code!r} in {entry!r}")
