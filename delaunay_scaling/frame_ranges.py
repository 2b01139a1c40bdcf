import math

import structlog
import torch

from .errors import DegenerateInputError
from .primitives import Frame

logger = structlog.get_logger()


def frame_ranges(centers: torch.Tensor, radii: torch.Tensor) -> Frame:
    """
    Tightest axis-aligned box around a union of circles.
    Args:
        centers (torch.Tensor): (M, 2) circle centres.
        radii (torch.Tensor): (M,) circle radii.
    Returns:
        Frame: (xmin, xmax, ymin, ymax) with xmin = min(cx - r), xmax = max(cx + r), same for y.
    """
    centers = torch.as_tensor(centers, dtype=torch.float64)
    radii = torch.as_tensor(radii, dtype=torch.float64)
    if centers.ndim != 2 or centers.shape[1] != 2:
        raise DegenerateInputError(f"Circle centres must have shape (M, 2), got {tuple(centers.shape)}.")
    if radii.ndim != 1 or radii.shape[0] != centers.shape[0]:
        raise DegenerateInputError(
            f"Expected {centers.shape[0]} radii, got tensor of shape {tuple(radii.shape)}."
        )
    if centers.shape[0] == 0:
        raise DegenerateInputError("Cannot compute a frame from an empty set of circles.")
    if not (torch.isfinite(centers).all() and torch.isfinite(radii).all()):
        raise DegenerateInputError("Circle centres and radii must be finite.")
    if (radii < 0).any():
        raise DegenerateInputError("Circle radii must be non-negative.")

    frame = Frame(
        torch.min(centers[:, 0] - radii).item(),
        torch.max(centers[:, 0] + radii).item(),
        torch.min(centers[:, 1] - radii).item(),
        torch.max(centers[:, 1] + radii).item(),
    )
    logger.debug("frame_ranges", n_circles=centers.shape[0], frame=tuple(frame))
    return frame


def validate_frame(frame) -> Frame:
    """Coerces a 4-sequence (xmin, xmax, ymin, ymax) to a Frame that yields a finite scale factor."""
    try:
        frame = Frame(*(float(v) for v in frame))
    except (TypeError, ValueError) as exc:
        raise DegenerateInputError(f"Frame must be four numbers (xmin, xmax, ymin, ymax): {exc}") from exc

    if not all(math.isfinite(v) for v in frame):
        raise DegenerateInputError(f"Frame must be finite, got {tuple(frame)}.")
    if frame.width < 0 or frame.height < 0:
        raise DegenerateInputError(f"Frame bounds are inverted: {tuple(frame)}.")
    if frame.extent <= 0:
        raise DegenerateInputError(f"Frame has zero extent: {tuple(frame)}.")
    return frame
