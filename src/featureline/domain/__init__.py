"""Domain models for featureline.

This module contains the value types and feature vocabulary shared by the
curve engine and its collaborators. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Independent of any rendering backend

Key classes:
- Point: A 2D point / vector
- Rect: An axis-aligned rectangle
- FeatureType: Road, river or railroad
- CenterLine: Road centerline marking style
- Feature: Control point editing capability
"""

from featureline.domain.feature import CenterLine, Feature, FeatureType
from featureline.domain.point import Point, Rect

__all__: list[str] = [
    # Enums
    "CenterLine",
    "FeatureType",
    # Core types
    "Feature",
    "Point",
    "Rect",
]
