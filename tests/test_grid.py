import tempfile
import unittest
from pathlib import Path

import numpy as np
from PIL import Image

from provincemap.grid import VOID, GridError, PixelGrid, as_grid, load_grid

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


class PixelGridTests(unittest.TestCase):
    def test_color_at_and_out_of_bounds(self) -> None:
        grid = PixelGrid.from_rows([[RED, BLUE], [BLUE, RED]])
        self.assertEqual((grid.width, grid.height), (2, 2))
        self.assertEqual(grid.color_at(0, 0), RED)
        self.assertEqual(grid.color_at(1, 0), BLUE)
        for x, y in [(-1, 0), (0, -1), (2, 0), (0, 2), (-1, -1)]:
            self.assertEqual(grid.color_at(x, y), VOID)

    def test_rgb_input_gets_opaque_alpha(self) -> None:
        arr = np.zeros((2, 3, 3), dtype=np.uint8)
        arr[:, :, 0] = 200
        grid = PixelGrid(arr)
        self.assertEqual(grid.color_at(2, 1), (200, 0, 0, 255))
        self.assertEqual(grid.colors(), {(200, 0, 0, 255)})

    def test_transparent_pixels_become_void(self) -> None:
        arr = np.array([[[10, 20, 30, 0], [10, 20, 30, 255]]], dtype=np.uint8)
        grid = PixelGrid(arr)
        self.assertEqual(grid.color_at(0, 0), VOID)
        self.assertEqual(grid.colors(), {(10, 20, 30, 255)})

    def test_corner_block(self) -> None:
        grid = PixelGrid.from_rows([[RED, BLUE], [BLUE, RED]])
        self.assertEqual(grid.corner_block((1, 1)), (RED, BLUE, BLUE, RED))
        self.assertEqual(grid.corner_block((0, 0)), (VOID, VOID, VOID, RED))

    def test_labels_mark_void_as_minus_one(self) -> None:
        grid = PixelGrid.from_rows([[RED, VOID], [BLUE, RED]])
        labels = grid.labels
        self.assertEqual(labels.shape, (2, 2))
        self.assertEqual(labels[0, 1], -1)
        self.assertEqual(labels[0, 0], labels[1, 1])
        self.assertNotEqual(labels[0, 0], labels[1, 0])
        self.assertTrue((labels[[0, 1, 1], [0, 0, 1]] >= 0).all())

    def test_input_faults(self) -> None:
        with self.assertRaises(GridError):
            PixelGrid(None)
        with self.assertRaises(GridError):
            PixelGrid(np.zeros((0, 4, 4), dtype=np.uint8))
        with self.assertRaises(GridError):
            PixelGrid(np.zeros((4, 4), dtype=np.uint8))
        with self.assertRaises(GridError):
            PixelGrid(np.zeros((4, 4, 2), dtype=np.uint8))
        with self.assertRaises(GridError):
            PixelGrid.from_rows([])
        with self.assertRaises(GridError):
            PixelGrid.from_rows([[RED, RED], [RED]])
        with self.assertRaises(GridError):
            as_grid(None)
        self.assertTrue(issubclass(GridError, ValueError))

    def test_non_integer_and_out_of_range_channels_rejected(self) -> None:
        with self.assertRaises(GridError):
            PixelGrid(np.full((2, 2, 4), 0.5, dtype=np.float32))
        with self.assertRaises(GridError):
            PixelGrid(np.full((2, 2, 3), 1.0))
        too_bright = np.full((2, 2, 4), 255, dtype=np.int64)
        too_bright[0, 0, 3] = 511
        with self.assertRaises(GridError):
            PixelGrid(too_bright)
        with self.assertRaises(GridError):
            PixelGrid.from_rows([[(-1, 0, 0, 255)]])

    def test_from_image_and_load_grid(self) -> None:
        img = Image.new("RGB", (3, 2), color=(0, 128, 0))
        img.putpixel((1, 1), (255, 255, 255))
        grid = as_grid(img)
        self.assertEqual((grid.width, grid.height), (3, 2))
        self.assertEqual(grid.color_at(1, 1), (255, 255, 255, 255))
        self.assertEqual(grid.color_at(0, 0), (0, 128, 0, 255))

        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "provinces.png"
            img.save(path)
            loaded = load_grid(path)
            self.assertEqual(loaded.color_at(1, 1), (255, 255, 255, 255))
            with self.assertRaises(GridError):
                load_grid(Path(tmp_dir) / "missing.png")


if __name__ == "__main__":
    unittest.main()
