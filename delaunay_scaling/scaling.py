import structlog
import torch

from .circumcircle_union import circumcircle_union
from .errors import DegenerateInputError
from .frame_ranges import frame_ranges, validate_frame
from .geometry_core import quick_hull_2d
from .primitives import Frame, as_points_tensor

logger = structlog.get_logger()

# Points land in [SCALE_OFFSET, SCALE_OFFSET + SCALE_TARGET] on both axes.
SCALE_TARGET = 0.98
SCALE_OFFSET = 1.01


def shrink(points, frame) -> torch.Tensor:
    """
    Maps points from original coordinates into the working square.
    Args:
        points: (N, 2) tensor, array or sequence of (x, y) pairs.
        frame: (xmin, xmax, ymin, ymax), usually from `frame_ranges`.
    Returns:
        torch.Tensor (N, 2): ((x - xmin) * s + 1.01, (y - ymin) * s + 1.01), s = 0.98 / max(h, b).
    """
    frame = validate_frame(frame)
    points = as_points_tensor(points)
    scale = SCALE_TARGET / frame.extent
    origin = torch.tensor([frame.xmin, frame.ymin], dtype=torch.float64)
    return (points - origin) * scale + SCALE_OFFSET


def expand(points, frame) -> torch.Tensor:
    """
    Inverse of `shrink` for the same frame. Accepts any points in working coordinates,
    including points the triangulator added.
    """
    frame = validate_frame(frame)
    points = as_points_tensor(points)
    scale = frame.extent / SCALE_TARGET
    origin = torch.tensor([frame.xmin, frame.ymin], dtype=torch.float64)
    return (points - SCALE_OFFSET) * scale + origin


def scale_shift_points(points):
    """
    Scales a point set into the working square so that the union of all circumcircles
    of its eventual Delaunay triangulation stays inside the square.

    Pipeline: convex hull -> union of hull-edge circumcircles -> frame -> shrink.
    Keep the returned frame and pass it to `expand` to map triangulation output back.

    Args:
        points: (N, 2) tensor, array or sequence of (x, y) pairs; at least two distinct,
                finite points.
    Returns:
        Tuple[torch.Tensor, Frame]: scaled points (same length and order as the input) and
                                    the frame used.
    """
    points = as_points_tensor(points)
    n_points = points.shape[0]
    if n_points < 2:
        raise DegenerateInputError(f"Need at least 2 points to scale, got {n_points}.")
    if not torch.isfinite(points).all():
        raise DegenerateInputError("Point coordinates must be finite.")
    if bool((points == points[0]).all()):
        raise DegenerateInputError(f"All {n_points} points are identical; the frame would have zero extent.")

    hull = quick_hull_2d(points)
    centers, radii = circumcircle_union(points, hull)
    frame = frame_ranges(centers, radii)
    scaled = shrink(points, frame)

    logger.info("scale_shift_points", n_points=n_points, n_hull=hull.shape[0], frame=tuple(frame))
    return scaled, frame


scaleShiftPoints = scale_shift_points
