import io
import unittest

from heapselect.auxiliary.errors import StreamFormatError
from heapselect.datahandling.streams import (as_stream, random_datapoints,
                                             read_datapoints,
                                             write_datapoints)
from heapselect.datastructures.records import DataPoint


class TestDataPointStreams(unittest.TestCase):
    def test_write_format(self):
        stream = io.StringIO()
        count = write_datapoints(
            stream, [DataPoint("A", 1), DataPoint("", -2.5)])
        self.assertEqual(count, 2)
        self.assertEqual(stream.getvalue(), '"A"\t1\n""\t-2.5\n')

    def test_awkward_names_survive(self):
        points = [DataPoint("tab\there", 1), DataPoint('quote "q"', 2),
                  DataPoint("two\nlines", 3), DataPoint("", 4),
                  DataPoint("a\rb", 5), DataPoint("crlf\r\n", 6)]
        self.assertEqual(list(read_datapoints(as_stream(points))), points)

    def test_weight_types(self):
        points = list(read_datapoints(io.StringIO("a\t3\nb\t3.5\nc\t-7\n")))
        self.assertIsInstance(points[0].weight, int)
        self.assertIsInstance(points[1].weight, float)
        self.assertEqual(points[2], DataPoint("c", -7))

    def test_blank_lines_skipped(self):
        points = list(read_datapoints(io.StringIO("a\t1\n\nb\t2\n")))
        self.assertEqual(points, [DataPoint("a", 1), DataPoint("b", 2)])

    def test_malformed_lines(self):
        with self.assertRaises(StreamFormatError) as context:
            list(read_datapoints(io.StringIO("a\t1\nb\tfoo\n")))
        self.assertEqual(context.exception.line_number, 2)
        with self.assertRaises(StreamFormatError):
            list(read_datapoints(io.StringIO("no weight\n")))
        with self.assertRaises(StreamFormatError):
            list(read_datapoints(io.StringIO("a\tnan\n")))

    def test_invalid_csv_lines(self):
        with self.assertRaises(StreamFormatError) as context:
            list(read_datapoints(io.StringIO("a\t1\na\rb\t2\n")))
        self.assertEqual(context.exception.line_number, 2)
        with self.assertRaises(StreamFormatError):
            list(read_datapoints(io.StringIO('"unterminated\t1')))

    def test_reading_is_lazy(self):
        stream = io.StringIO("a\t1\nb\tfoo\n")
        reader = read_datapoints(stream)
        self.assertEqual(next(reader), DataPoint("a", 1))
        with self.assertRaises(StreamFormatError):
            next(reader)


class TestRandomDataPoints(unittest.TestCase):
    def test_count_and_bounds(self):
        points = list(random_datapoints(3000, -5, 5, name="x", seed=0))
        self.assertEqual(len(points), 3000)
        self.assertTrue(all(-5 <= point.weight <= 5 for point in points))
        self.assertTrue(all(point.name == "x" for point in points))
        self.assertTrue(all(isinstance(point.weight, int)
                            for point in points))

    def test_seeded_is_reproducible(self):
        self.assertEqual(list(random_datapoints(100, 0, 10, seed=9)),
                         list(random_datapoints(100, 0, 10, seed=9)))

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            random_datapoints(-1, 0, 1)
        with self.assertRaises(ValueError):
            random_datapoints(1, 2, 1)
