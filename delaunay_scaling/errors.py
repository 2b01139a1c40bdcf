class DelaunayScalingError(ValueError):
    """Base class for errors raised while preparing a point set for triangulation."""


class DegenerateInputError(DelaunayScalingError):
    """Point set or frame cannot produce a finite scale factor.

    Raised for fewer than two points, all points identical, non-finite coordinates,
    and frames with zero or negative extent.
    """


class DegenerateGeometryError(DelaunayScalingError):
    """Three points are (numerically) collinear, so no circumcircle exists."""


class EmptyHullError(DelaunayScalingError):
    """Convex hull requested for an empty or single-point set."""
