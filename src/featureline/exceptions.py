"""Exception hierarchy for Featureline."""

from typing import Any


class FeaturelineError(Exception):
    """Base exception for all Featureline errors."""

    pass


class GeometryError(FeaturelineError):
    """Errors in curve or surface geometry."""

    pass


class InvalidParameterError(GeometryError, ValueError):
    """A geometry parameter is outside its valid domain."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name} {value!r}: {reason}")


class ControlPointIndexError(GeometryError, IndexError):
    """Control point index does not address an existing control point."""

    def __init__(self, index: float, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Control point index {index} out of range (0..{count - 1})")


class FeatureError(FeaturelineError):
    """Errors related to feature construction."""

    pass


class UnknownFeatureTypeError(FeatureError):
    """Requested feature type does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown feature type '{name}'")
