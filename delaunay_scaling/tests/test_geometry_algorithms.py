import torch
import unittest
from delaunay_scaling.errors import DegenerateGeometryError
from delaunay_scaling.geometry_algorithms import (
    circumcircle_2pt, circumcircle_3pt, circumcircles_3pt_batch, points_distance
)


def t(*coords):
    return torch.tensor(coords, dtype=torch.float64)


class TestCircumcircle2pt(unittest.TestCase):
    def test_diameter_circle(self):
        circle = circumcircle_2pt(t(0., 0.), t(6., 8.))
        self.assertTrue(torch.allclose(circle.center, t(3., 4.)))
        self.assertAlmostEqual(circle.radius, 5.0)

    def test_coincident_points(self):
        circle = circumcircle_2pt(t(1., 1.), t(1., 1.))
        self.assertEqual(circle.radius, 0.0)


class TestCircumcircle3pt(unittest.TestCase):
    def test_right_angle(self):
        circle = circumcircle_3pt(t(0., 0.), t(2., 0.), t(0., 2.))
        self.assertTrue(torch.allclose(circle.center, t(1., 1.)))
        self.assertAlmostEqual(circle.radius, 2 ** 0.5)

    def test_equilateral(self):
        circle = circumcircle_3pt(t(0., 0.), t(2., 0.), t(1., 3 ** 0.5))
        self.assertTrue(torch.allclose(circle.center, t(1.0, 1.0 / 3 ** 0.5)))
        self.assertAlmostEqual(circle.radius, 2.0 / 3 ** 0.5)

    def test_accepts_sequences(self):
        circle = circumcircle_3pt((0., 0.), (4., 0.), (2., 0.5))
        self.assertAlmostEqual(circle.cx, 2.0)
        self.assertAlmostEqual(circle.cy, -3.75)
        self.assertAlmostEqual(circle.radius, 4.25)

    def test_collinear(self):
        with self.assertRaises(DegenerateGeometryError):
            circumcircle_3pt(t(0., 0.), t(1., 1.), t(2., 2.))

    def test_coincident(self):
        with self.assertRaises(DegenerateGeometryError):
            circumcircle_3pt(t(0., 0.), t(1., 0.), t(0., 0.))

    def test_small_scale_triangle_is_not_degenerate(self):
        scale = 1e-6
        circle = circumcircle_3pt(t(0., 0.), t(2 * scale, 0.), t(0., 2 * scale))
        self.assertAlmostEqual(circle.radius / scale, 2 ** 0.5, places=9)


class TestCircumcirclesBatch(unittest.TestCase):
    def test_mixed_valid_and_degenerate(self):
        candidates = t([0., 2.], [1., 0.], [2., 2.])
        centers, radii, valid = circumcircles_3pt_batch(t(0., 0.), t(2., 0.), candidates)
        self.assertEqual(valid.tolist(), [True, False, True])
        self.assertTrue(torch.isfinite(centers).all())
        self.assertTrue(torch.isfinite(radii).all())
        self.assertEqual(radii[1].item(), 0.0)
        self.assertTrue(torch.allclose(centers[0], t(1., 1.)))
        self.assertAlmostEqual(radii[2].item(), 2 ** 0.5)

    def test_all_points_on_circle(self):
        torch.manual_seed(1)
        a, b = t(-1., 0.5), t(3., -2.)
        candidates = torch.randn(20, 2, dtype=torch.float64) * 4.0
        centers, radii, valid = circumcircles_3pt_batch(a, b, candidates)
        for i in range(candidates.shape[0]):
            if not valid[i]:
                continue
            for p in (a, b, candidates[i]):
                self.assertAlmostEqual(torch.norm(p - centers[i]).item() / radii[i].item(), 1.0, places=9)


class TestPointsDistance(unittest.TestCase):
    def test_distances(self):
        d = points_distance(t(0., 0.), [(3., 4.), (0., -2.)])
        self.assertTrue(torch.allclose(d, t(5., 2.)))


if __name__ == '__main__':
    unittest.main()
