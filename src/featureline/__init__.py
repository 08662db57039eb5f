"""Featureline - Editable Bezier features with offset surfaces.

Featureline models linear map features (roads, rivers, railroads) as chains of
cubic Bezier segments that stay tangent-continuous while their control points
are edited, tessellates them into polylines and builds the filled surface band
around the centerline for display.

Example:
    >>> from featureline.domain import Point
    >>> from featureline.features import Road
    >>> road = Road()
    >>> road.add_segment(Point(300.0, 300.0), Point(300.0, 400.0))
    >>> outline = road.surface()
"""

__version__ = "0.1.0"
__author__ = "Bytetrail"

__all__ = ["__author__", "__version__"]
