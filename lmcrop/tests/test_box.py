import unittest
import torch
import pytest
import sys
import os

# Add the parent directory to the path so we can import our module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from lmcrop.box import Box, CpuBox, create_box, dispose_box
from lmcrop.key_point import KeyPoint


class TestCreateBox(unittest.TestCase):
    """Test suite for box construction."""

    def test_derives_points_from_combined_buffer(self):
        box = create_box(torch.tensor([[0.0, 0.0, 10.0, 10.0]]))

        torch.testing.assert_close(box.start_point, torch.tensor([[0.0, 0.0]]))
        torch.testing.assert_close(box.end_point, torch.tensor([[10.0, 10.0]]))

    def test_explicit_points_used_as_is(self):
        start = torch.tensor([[1.0, 2.0]])
        end = torch.tensor([[3.0, 4.0]])
        box = create_box(torch.tensor([[1.0, 2.0, 3.0, 4.0]]), start, end)

        self.assertIs(box.start_point, start)
        self.assertIs(box.end_point, end)

    def test_derived_points_do_not_alias_buffer(self):
        start_end = torch.tensor([[1.0, 2.0, 3.0, 4.0]])
        box = create_box(start_end)
        start_end.zero_()

        torch.testing.assert_close(box.start_point, torch.tensor([[1.0, 2.0]]))
        torch.testing.assert_close(box.end_point, torch.tensor([[3.0, 4.0]]))

    def test_start_end_round_trip(self):
        """The combined buffer is reproduced from the derived points."""
        for start_end in (
            torch.tensor([[0.0, 0.0, 10.0, 10.0]]),
            torch.tensor([[12.5, 3.0, 40.0, 77.25]]),
            torch.tensor([[1.0, 2.0, 3.0, 4.0], [5.0, 6.0, 7.0, 8.0]]),
        ):
            box = create_box(start_end)
            torch.testing.assert_close(box.start_end_tensor, start_end)

    def test_flat_buffer_is_single_row(self):
        box = create_box(torch.tensor([5.0, 6.0, 7.0, 8.0]))

        self.assertEqual(box.start_point.shape, (1, 2))
        torch.testing.assert_close(box.end_point, torch.tensor([[7.0, 8.0]]))

    def test_malformed_buffer_raises(self):
        with pytest.raises(RuntimeError):
            create_box(torch.tensor([[0.0, 0.0, 10.0]]))

    def test_landmarks_are_kept(self):
        landmarks = [KeyPoint(1.0, 2.0), KeyPoint(3.0, 4.0)]
        box = create_box(torch.tensor([[0.0, 0.0, 10.0, 10.0]]), landmarks=landmarks)

        self.assertEqual(box.landmarks, landmarks)
        self.assertEqual(box.landmarks[1], KeyPoint(3.0, 4.0))

    def test_points_only(self):
        start = torch.tensor([[1.0, 2.0]])
        end = torch.tensor([[3.0, 4.0]])
        box = create_box(start_point=start, end_point=end)

        torch.testing.assert_close(
            box.start_end_tensor, torch.tensor([[1.0, 2.0, 3.0, 4.0]])
        )

    def test_to_cpu(self):
        box = create_box(torch.tensor([[10.0, 20.0, 30.0, 50.0]]))
        cpu_box = box.to_cpu()

        self.assertIsInstance(cpu_box, CpuBox)
        self.assertEqual(cpu_box.start_point, (10.0, 20.0))
        self.assertEqual(cpu_box.end_point, (30.0, 50.0))


class TestDisposeBox(unittest.TestCase):
    """Test suite for box disposal."""

    def test_dispose_releases_buffers(self):
        box = create_box(torch.tensor([[0.0, 0.0, 10.0, 10.0]]))
        dispose_box(box)

        self.assertTrue(box.is_disposed)
        self.assertIsNone(box.start_point)
        self.assertIsNone(box.end_point)

    def test_dispose_missing_start_point_is_noop(self):
        box = Box(start_point=None, end_point=torch.tensor([[1.0, 1.0]]))
        dispose_box(box)

        # end_point is left alone since the guard short-circuits
        self.assertIsNotNone(box.end_point)

    def test_dispose_none_is_noop(self):
        dispose_box(None)

    def test_dispose_twice(self):
        box = create_box(torch.tensor([[0.0, 0.0, 10.0, 10.0]]))
        dispose_box(box)
        dispose_box(box)
        self.assertTrue(box.is_disposed)

    def test_context_manager_disposes_on_error(self):
        box = create_box(torch.tensor([[0.0, 0.0, 10.0, 10.0]]))

        with pytest.raises(KeyError):
            with box as scoped:
                self.assertIs(scoped, box)
                raise KeyError("boom")

        self.assertTrue(box.is_disposed)


if __name__ == "__main__":
    unittest.main()
