import torch

from .errors import DegenerateGeometryError
from .geometry_core import EPSILON
from .primitives import Circle, as_points_tensor


def circumcircle_2pt(a: torch.Tensor, b: torch.Tensor) -> Circle:
    """
    Smallest circle through a and b: the segment ab is its diameter.
    Args:
        a, b: torch.Tensor of shape (2,).
    Returns:
        Circle: centre at the midpoint, radius half the distance |ab|.
    """
    center = (a + b) / 2.0
    dx = (b[0] - a[0]) / 2.0
    dy = (b[1] - a[1]) / 2.0
    radius = torch.sqrt(dx**2 + dy**2).item()
    return Circle(center, radius)


def circumcircles_3pt_batch(a: torch.Tensor, b: torch.Tensor, candidates: torch.Tensor,
                            tol: float = EPSILON):
    """
    Circumcircles of the triangles (a, b, c) for every row c of `candidates`.
    Args:
        a, b: torch.Tensor of shape (2,), the fixed edge.
        candidates: torch.Tensor of shape (M, 2).
        tol (float): Relative collinearity tolerance. A triangle is degenerate when
                     |(b-a) x (c-a)| <= tol * |b-a| * |c-a|.
    Returns:
        Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
            - centers (M, 2): circumcentres, zero for degenerate rows.
            - radii (M,): circumradii, zero for degenerate rows.
            - valid (M,): bool mask, False where the triangle is degenerate.
    """
    # Using formulas from Wikipedia / mathworld.wolfram.com
    # D = 2 * (ax(by-cy) + bx(cy-ay) + cx(ay-by)), zero iff a, b, c are collinear.
    ax, ay = a[0], a[1]
    bx, by = b[0], b[1]
    cx, cy = candidates[:, 0], candidates[:, 1]

    D = 2 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))

    ab_len = torch.sqrt((bx - ax)**2 + (by - ay)**2)
    ac_len = torch.sqrt((cx - ax)**2 + (cy - ay)**2)
    valid = torch.abs(D) > 2 * tol * ab_len * ac_len
    safe_D = torch.where(valid, D, torch.ones_like(D))

    la = ax**2 + ay**2
    lb = bx**2 + by**2
    lc = cx**2 + cy**2

    ux = (la * (by - cy) + lb * (cy - ay) + lc * (ay - by)) / safe_D
    uy = (la * (cx - bx) + lb * (ax - cx) + lc * (bx - ax)) / safe_D
    radii = torch.sqrt((ux - ax)**2 + (uy - ay)**2)

    centers = torch.stack([ux, uy], dim=1)
    centers = torch.where(valid.unsqueeze(1), centers, torch.zeros_like(centers))
    radii = torch.where(valid, radii, torch.zeros_like(radii))
    return centers, radii, valid


def circumcircle_3pt(a, b, c, tol: float = EPSILON) -> Circle:
    """
    Circumcircle of the triangle abc.
    Raises:
        DegenerateGeometryError: if a, b and c are collinear (or two of them coincide).
    """
    a, b, c = (torch.as_tensor(p, dtype=torch.float64) for p in (a, b, c))
    centers, radii, valid = circumcircles_3pt_batch(a, b, c.reshape(1, 2), tol)
    if not valid[0]:
        raise DegenerateGeometryError(
            f"Points {a.tolist()}, {b.tolist()}, {c.tolist()} are collinear; no circumcircle exists."
        )
    return Circle(centers[0], radii[0].item())


def points_distance(p1: torch.Tensor, points: torch.Tensor) -> torch.Tensor:
    """Euclidean distances from p1 (2,) to every row of points (M, 2)."""
    points = as_points_tensor(points)
    return torch.sqrt(torch.sum((points - p1.unsqueeze(0))**2, dim=1))
