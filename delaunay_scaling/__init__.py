# Delaunay Scaling Package
# Prepares 2D point sets for a frame-based Delaunay triangulator.
from .errors import DelaunayScalingError, DegenerateInputError, DegenerateGeometryError, EmptyHullError
from .primitives import Point2D, Line2D, Circle, Frame, as_points_tensor, as_point_list
from .geometry_core import ConvexHull, quick_hull_2d, orientation_2d, point_line_distance
from .geometry_algorithms import circumcircle_2pt, circumcircle_3pt
from .circumcircle_union import circumcircle_union, edge_circles
from .frame_ranges import frame_ranges, validate_frame
from .scaling import shrink, expand, scale_shift_points, scaleShiftPoints, SCALE_TARGET, SCALE_OFFSET
