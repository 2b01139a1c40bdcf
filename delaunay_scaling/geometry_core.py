import structlog
import torch

from .errors import EmptyHullError
from .primitives import as_points_tensor

logger = structlog.get_logger()

EPSILON = 1e-12


def _cross_2d(a: torch.Tensor, b: torch.Tensor, p: torch.Tensor) -> torch.Tensor:
    # (b - a) x (p - a), p may be (2,) or (M, 2)
    return (b[0] - a[0]) * (p[..., 1] - a[1]) - (b[1] - a[1]) * (p[..., 0] - a[0])


def orientation_2d(a: torch.Tensor, b: torch.Tensor, p: torch.Tensor, tol: float = 0.0) -> int:
    """
    Orientation of p relative to the directed line a -> b.
    Returns:
        int: 1 if p is to the left, -1 if to the right, 0 if collinear (|cross| <= tol).
    """
    cross = _cross_2d(a, b, p).item()
    if cross > tol:
        return 1
    if cross < -tol:
        return -1
    return 0


def point_line_distances(a: torch.Tensor, b: torch.Tensor, points: torch.Tensor) -> torch.Tensor:
    """
    Perpendicular distances of points to the infinite line through a and b.
    Args:
        a, b: torch.Tensor of shape (2,), distinct points defining the line.
        points: torch.Tensor of shape (M, 2).
    Returns:
        torch.Tensor of shape (M,).
    """
    ax, ay = a[0], a[1]
    bx, by = b[0], b[1]
    numerator = torch.abs((by - ay) * points[:, 0] - (bx - ax) * points[:, 1] + bx * ay - by * ax)
    return numerator / torch.sqrt((by - ay)**2 + (bx - ax)**2)


def point_line_distance(a: torch.Tensor, b: torch.Tensor, c: torch.Tensor) -> float:
    return point_line_distances(a, b, c.reshape(1, 2))[0].item()


def _outside(points: torch.Tensor, start: int, end: int, candidates: torch.Tensor, tol: float) -> torch.Tensor:
    """Candidates strictly to the right of start -> end, i.e. outside the current hull edge."""
    if candidates.numel() == 0:
        return candidates
    cross = _cross_2d(points[start], points[end], points[candidates])
    return candidates[cross < -tol]


def quick_hull_2d(points, tol: float = 0.0) -> torch.Tensor:
    """
    Computes the convex hull of 2D points with QuickHull.

    The two lexicographic extremes (min and max by x, then y) seed the hull. Each side of
    the seed line is refined by repeatedly taking the candidate farthest from a hull edge
    and inserting it directly after the edge's start vertex. Work is kept on an explicit
    stack of (edge_start, edge_end, candidates) tasks. Every pending edge is a consecutive
    pair of the hull list, so the result is a consistently ordered (counter-clockwise)
    boundary. Points exactly on an edge are not hull vertices.

    Ties for the farthest point resolve to the candidate that comes first in input order.

    Args:
        points: (N, 2) tensor, array or sequence of (x, y) pairs, N >= 2.
        tol (float): Cross products with magnitude <= tol count as collinear.
    Returns:
        torch.Tensor: Long tensor of indices into `points`, in hull order.
    """
    points = as_points_tensor(points)
    n_points = points.shape[0]
    if n_points < 2:
        raise EmptyHullError(f"Convex hull needs at least 2 points, got {n_points}.")

    coords = points.tolist()
    a_idx = min(range(n_points), key=lambda i: (coords[i][0], coords[i][1]))
    b_idx = max(range(n_points), key=lambda i: (coords[i][0], coords[i][1]))

    if coords[a_idx] == coords[b_idx]:
        # Every point coincides; any second index closes the degenerate hull.
        other = 1 if a_idx == 0 else 0
        logger.debug("quick_hull_2d: all points coincide", n_points=n_points)
        return torch.tensor([a_idx, other], dtype=torch.long)

    remaining = torch.arange(n_points)
    remaining = remaining[(remaining != a_idx) & (remaining != b_idx)]

    hull = [a_idx, b_idx]
    # Right of a -> b is below the seed line, left of a -> b is right of b -> a.
    stack = [
        (b_idx, a_idx, _outside(points, b_idx, a_idx, remaining, tol)),
        (a_idx, b_idx, _outside(points, a_idx, b_idx, remaining, tol)),
    ]

    while stack:
        start, end, candidates = stack.pop()
        if candidates.numel() == 0:
            continue

        distances = point_line_distances(points[start], points[end], points[candidates])
        farthest = candidates[torch.argmax(distances)].item()
        hull.insert(hull.index(start) + 1, farthest)

        rest = candidates[candidates != farthest]
        stack.append((farthest, end, _outside(points, farthest, end, rest, tol)))
        stack.append((start, farthest, _outside(points, start, farthest, rest, tol)))

    logger.debug("quick_hull_2d", n_points=n_points, n_hull=len(hull))
    return torch.tensor(hull, dtype=torch.long)


class ConvexHull:
    """Convex hull of a 2D point set, backed by `quick_hull_2d`."""

    def __init__(self, points, tol: float = 0.0):
        self.points = as_points_tensor(points)
        self.tol = tol

        self.vertices: torch.Tensor = quick_hull_2d(self.points, tol)
        n_vertices = self.vertices.shape[0]
        self.simplices: torch.Tensor = torch.stack(
            [self.vertices, torch.roll(self.vertices, -1)], dim=1
        ) if n_vertices > 2 else self.vertices.reshape(1, 2)

        if n_vertices < 3:
            self._area = torch.tensor(0.0, dtype=torch.float64)
        else:
            x, y = self.hull_points[:, 0], self.hull_points[:, 1]
            self._area = 0.5 * torch.abs(torch.sum(x * torch.roll(y, -1) - torch.roll(x, -1) * y))

    @property
    def hull_points(self) -> torch.Tensor:
        return self.points[self.vertices]

    @property
    def area(self) -> torch.Tensor:
        return self._area

    def contains(self, point, tol: float = 1e-9) -> bool:
        """True if point lies inside or on the hull polygon (hull must have >= 3 vertices)."""
        p = torch.as_tensor(point, dtype=torch.float64)
        hull_pts = self.hull_points
        for i in range(hull_pts.shape[0]):
            a, b = hull_pts[i], hull_pts[(i + 1) % hull_pts.shape[0]]
            if _cross_2d(a, b, p).item() < -tol * max(1.0, torch.norm(b - a).item()):
                return False
        return True
