import structlog
import torch

from .geometry_algorithms import circumcircle_2pt, circumcircles_3pt_batch, points_distance
from .geometry_core import EPSILON, quick_hull_2d
from .primitives import Circle, as_points_tensor

logger = structlog.get_logger()


def _edge_circle(a: torch.Tensor, b: torch.Tensor, points: torch.Tensor, tol: float):
    """Largest circle for hull edge ab: the diametral circle, grown by every point strictly inside it."""
    circle = circumcircle_2pt(a, b)
    inside = points_distance(circle.center, points) < circle.radius
    candidates = points[inside]
    if candidates.shape[0] == 0:
        return circle.center, circle.radius, 0

    centers, radii, valid = circumcircles_3pt_batch(a, b, candidates, tol)
    n_skipped = int((~valid).sum().item())
    if not valid.any():
        return circle.center, circle.radius, n_skipped

    # Degenerate rows carry radius 0 and can never win.
    best = torch.argmax(radii).item()
    if radii[best].item() > circle.radius:
        return centers[best], radii[best].item(), n_skipped
    return circle.center, circle.radius, n_skipped


def circumcircle_union(points, hull_indices: torch.Tensor | None = None, tol: float = EPSILON):
    """
    One circle per hull edge, covering the circumcircles that edge can take part in.

    For each cyclic hull edge (H[i], H[i+1]) the circle starts as the one with the edge as
    diameter. Every input point strictly inside that circle is a candidate; its
    circumcircle with the edge replaces the current circle when strictly larger. Collinear
    candidates (e.g. points on the edge itself) have no circumcircle and are skipped.

    Args:
        points: (N, 2) tensor, array or sequence of (x, y) pairs.
        hull_indices (torch.Tensor | None): Ordered hull indices into `points`. Computed with
                                            `quick_hull_2d` when None.
        tol (float): Relative collinearity tolerance for the three-point circumcircle.
    Returns:
        Tuple[torch.Tensor, torch.Tensor]:
            - centers (H, 2): circle centres, one per hull edge.
            - radii (H,): circle radii.
    """
    points = as_points_tensor(points)
    if hull_indices is None:
        hull_indices = quick_hull_2d(points)
    hull_indices = torch.as_tensor(hull_indices, dtype=torch.long)

    n_hull = hull_indices.shape[0]
    centers = torch.empty((n_hull, 2), dtype=torch.float64)
    radii = torch.empty((n_hull,), dtype=torch.float64)
    n_skipped = 0

    for i in range(n_hull):
        a = points[hull_indices[i]]
        b = points[hull_indices[(i + 1) % n_hull]]
        center, radius, skipped = _edge_circle(a, b, points, tol)
        centers[i] = center
        radii[i] = radius
        n_skipped += skipped

    if n_skipped:
        logger.debug("circumcircle_union: skipped collinear candidates", n_skipped=n_skipped)
    logger.debug("circumcircle_union", n_edges=n_hull, max_radius=radii.max().item() if n_hull else None)
    return centers, radii


def edge_circles(points, hull_indices: torch.Tensor | None = None, tol: float = EPSILON) -> list[Circle]:
    centers, radii = circumcircle_union(points, hull_indices, tol)
    return [Circle(center, radius) for center, radius in zip(centers, radii.tolist())]
