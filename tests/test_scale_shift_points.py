import numpy as np
import torch
import unittest
from delaunay_scaling import (
    Frame, Point2D, DegenerateInputError, as_point_list, expand, scale_shift_points, scaleShiftPoints
)


class TestScaleShiftPoints(unittest.TestCase):
    def test_right_triangle(self):
        points = [Point2D(0., 0.), Point2D(10., 0.), Point2D(0., 10.)]
        scaled, frame = scale_shift_points(points)
        self.assertIsInstance(frame, Frame)
        self.assertEqual(len(frame), 4)
        r = 50 ** 0.5
        self.assertAlmostEqual(frame.xmin, -5.0)
        self.assertAlmostEqual(frame.xmax, 5.0 + r)
        self.assertAlmostEqual(frame.ymin, -5.0)
        self.assertAlmostEqual(frame.ymax, 5.0 + r)
        self.assertEqual(scaled.shape, (3, 2))
        self.assertTrue(((scaled >= 1.0) & (scaled <= 2.0)).all())

    def test_output_order_and_round_trip(self):
        torch.manual_seed(11)
        points = torch.randn(300, 2, dtype=torch.float64) * torch.tensor([40., 3.], dtype=torch.float64) + 1e3
        scaled, frame = scale_shift_points(points)
        self.assertEqual(scaled.shape, points.shape)
        self.assertTrue((scaled >= 1.01 - 1e-12).all())
        self.assertTrue((scaled <= 1.99 + 1e-12).all())
        restored = expand(scaled, frame)
        self.assertTrue(torch.allclose(restored, points, rtol=1e-9, atol=1e-9))

    def test_frame_contains_all_points(self):
        torch.manual_seed(5)
        points = torch.rand(100, 2, dtype=torch.float64)
        _, frame = scale_shift_points(points)
        self.assertTrue((points[:, 0] >= frame.xmin).all() and (points[:, 0] <= frame.xmax).all())
        self.assertTrue((points[:, 1] >= frame.ymin).all() and (points[:, 1] <= frame.ymax).all())

    def test_collinear_input(self):
        scaled, frame = scale_shift_points([(0., 0.), (1., 0.), (2., 0.)])
        self.assertEqual(tuple(frame), (0.0, 2.0, -1.0, 1.0))
        self.assertTrue(torch.allclose(scaled[:, 0], torch.tensor([1.01, 1.5, 1.99], dtype=torch.float64)))
        self.assertTrue(torch.allclose(scaled[:, 1], torch.full((3,), 1.5, dtype=torch.float64)))

    def test_numpy_input_and_point_list_output(self):
        points = np.array([[0., 0.], [2., 0.], [1., 3.], [1., 1.]])
        scaled, frame = scaleShiftPoints(points)
        expanded = as_point_list(expand(scaled, tuple(frame)))
        self.assertIsInstance(expanded[0], Point2D)
        for p, q in zip(expanded, points.tolist()):
            self.assertAlmostEqual(p.x, q[0])
            self.assertAlmostEqual(p.y, q[1])

    def test_too_few_points(self):
        with self.assertRaises(DegenerateInputError):
            scale_shift_points([(1., 2.)])
        with self.assertRaises(DegenerateInputError):
            scale_shift_points([])

    def test_identical_points(self):
        with self.assertRaises(DegenerateInputError):
            scale_shift_points([(1., 2.), (1., 2.), (1., 2.)])

    def test_non_finite_points(self):
        with self.assertRaises(DegenerateInputError):
            scale_shift_points([(0., 0.), (float('nan'), 1.), (2., 2.)])

    def test_wrong_shape(self):
        with self.assertRaises(DegenerateInputError):
            scale_shift_points(torch.zeros((4, 3)))


if __name__ == '__main__':
    unittest.main()
