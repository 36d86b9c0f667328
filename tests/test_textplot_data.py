from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from textplot import PlotDataError, Point
from textplot.adapters import points_from_xy
from textplot.utils import histogram, points_from_pairs


class HistogramTests(unittest.TestCase):
    def test_histogram_buckets_are_half_open(self) -> None:
        self.assertEqual(
            histogram([(0.0, 0.0), (9.0, 9.0), (10.0, 10.0)], 0.0, 10.0, 2),
            [Point(0.0, 1.0), Point(5.0, 1.0)],
        )

    def test_histogram_ignores_values_outside_interval(self) -> None:
        data = [(0.0, -1.0), (0.0, 1.0), (0.0, 2.5), (0.0, 3.9), (0.0, 11.0)]
        self.assertEqual(
            histogram(data, 0.0, 4.0, 4),
            [Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 1.0), Point(3.0, 1.0)],
        )

    def test_histogram_of_empty_data(self) -> None:
        self.assertEqual(histogram([], 0.0, 1.0, 2), [Point(0.0, 0.0), Point(0.5, 0.0)])

    def test_histogram_rejects_bad_arguments(self) -> None:
        with self.assertRaises(ValueError):
            histogram([], 0.0, 1.0, 0)
        with self.assertRaises(ValueError):
            histogram([], 1.0, 1.0, 2)

    def test_points_from_pairs(self) -> None:
        self.assertEqual(points_from_pairs([(1, 2), (3.5, -1)]), [Point(1.0, 2.0), Point(3.5, -1.0)])


class ColumnInputTests(unittest.TestCase):
    def test_columns_decimal_and_missing_values(self) -> None:
        data = [Decimal("1.5"), Decimal("2.25"), None, Decimal("3.5")]
        points = points_from_xy(y=data)
        self.assertEqual(points, [Point(0.0, 1.5), Point(1.0, 2.25), Point(3.0, 3.5)])

    def test_columns_numpy_with_x(self) -> None:
        x = np.asarray([0.5, 1.0, np.nan], dtype=np.float64)
        y = np.asarray([1, 2, 3], dtype=np.int64)
        self.assertEqual(points_from_xy(y, x=x), [Point(0.5, 1.0), Point(1.0, 2.0)])

    def test_columns_torch_tensor(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        y = torch.tensor([1, 2, 3], dtype=torch.int64)
        points = points_from_xy(y=y)
        self.assertEqual([p.y for p in points], [1.0, 2.0, 3.0])

    def test_columns_pandas_dataframe_single_numeric_column(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"value": [1, 2, 3]})
        points = points_from_xy(y=df)
        self.assertEqual([p.y for p in points], [1.0, 2.0, 3.0])

    def test_columns_pandas_columns_by_name(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"month": [0, 1, 2], "temp": [-8.0, -7.4, -2.7]})
        points = points_from_xy("temp", x="month", data=df)
        self.assertEqual(points, [Point(0.0, -8.0), Point(1.0, -7.4), Point(2.0, -2.7)])
        with self.assertRaises(PlotDataError):
            points_from_xy("missing", data=df)

    def test_columns_rejects_bad_input(self) -> None:
        with self.assertRaises(PlotDataError):
            points_from_xy(y=[])
        with self.assertRaises(PlotDataError):
            points_from_xy(y=[1, 2], x=[1, 2, 3])
        with self.assertRaises(PlotDataError):
            points_from_xy(y=np.zeros((2, 2)))
        with self.assertRaises(PlotDataError):
            points_from_xy(y=["a", "b"])
        with self.assertRaises(PlotDataError):
            points_from_xy(y="abc")
        with self.assertRaises(PlotDataError):
            points_from_xy()


if __name__ == "__main__":
    unittest.main()
