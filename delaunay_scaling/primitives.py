import math
from typing import NamedTuple

import numpy as np
import torch

from .errors import DegenerateInputError


class Point2D(NamedTuple):
    x: float
    y: float


class Line2D(NamedTuple):
    """Directed line through two points, A -> B."""
    a: Point2D
    b: Point2D

    def cross(self, p) -> float:
        """(B - A) x (P - A). Positive when p lies to the left of A -> B."""
        return (self.b[0] - self.a[0]) * (p[1] - self.a[1]) - (self.b[1] - self.a[1]) * (p[0] - self.a[0])

    def orientation(self, p) -> int:
        """Returns 1 (left), -1 (right) or 0 (collinear)."""
        c = self.cross(p)
        if c > 0:
            return 1
        if c < 0:
            return -1
        return 0

    def distance(self, p) -> float:
        length = math.hypot(self.b[0] - self.a[0], self.b[1] - self.a[1])
        if length == 0.0:
            return math.hypot(p[0] - self.a[0], p[1] - self.a[1])
        return abs(self.cross(p)) / length


class Circle(NamedTuple):
    center: torch.Tensor  # (2,)
    radius: float

    @property
    def cx(self) -> float:
        return self.center[0].item()

    @property
    def cy(self) -> float:
        return self.center[1].item()


class Frame(NamedTuple):
    """Axis-aligned box around the union of hull circumcircles.

    Stored in the order (xmin, xmax, ymin, ymax) so it round-trips as a plain 4-tuple.
    """
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def extent(self) -> float:
        return max(self.height, self.width)


def as_points_tensor(points) -> torch.Tensor:
    """
    Coerces a point collection to a float64 tensor of shape (N, 2).
    Args:
        points: torch.Tensor or np.ndarray of shape (N, 2), or a sequence of Point2D / (x, y) pairs.
    Returns:
        torch.Tensor: (N, 2) float64 tensor. The input tensor is not modified.
    """
    if isinstance(points, torch.Tensor):
        tensor = points.to(torch.float64)
    elif isinstance(points, np.ndarray):
        tensor = torch.from_numpy(np.asarray(points, dtype=np.float64))
    else:
        points = list(points)
        if len(points) == 0:
            return torch.empty((0, 2), dtype=torch.float64)
        try:
            tensor = torch.tensor([[float(p[0]), float(p[1])] for p in points], dtype=torch.float64)
        except (TypeError, IndexError) as exc:
            raise DegenerateInputError(f"Points must be (x, y) pairs: {exc}") from exc

    if tensor.ndim == 1 and tensor.numel() == 0:
        return tensor.reshape(0, 2)
    if tensor.ndim != 2 or tensor.shape[1] != 2:
        raise DegenerateInputError(f"Points must have shape (N, 2), got {tuple(tensor.shape)}.")
    return tensor


def as_point_list(points: torch.Tensor) -> list[Point2D]:
    return [Point2D(float(x), float(y)) for x, y in points.tolist()]
