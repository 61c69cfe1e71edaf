import os
import tempfile
from typing import List
from unittest import TestCase

from rainbow.common.simple_stream import SimpleStream, StreamConsumedError


class TestSimpleStream(TestCase):
    def test_construction(self):
        self.assertListEqual([1, 2, 3, 'a', 'b'], SimpleStream.of(1, 2, 3, 'a', 'b').to_list())
        self.assertListEqual([1, 2, 3], SimpleStream.from_iterable([1, 2, 3]).to_list())
        self.assertListEqual([0.5, 0.5, 0.5], SimpleStream.generate(lambda: 0.5).limit(3).to_list())
        self.assertListEqual([1, 2, 4, 8], SimpleStream.iterate(1, lambda i: i * 2).limit(4).to_list())

    def test_lines(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, 'sample.txt')
            with open(path, 'w', encoding='utf-8') as f:
                f.write('alpha\nbravo\r\n\ncharlie')

            self.assertListEqual(['alpha', 'bravo', '', 'charlie'], SimpleStream.lines(path).to_list())

    def test_lines_from_missing_file(self):
        stream = SimpleStream.lines('/no/such/file.txt')

        with self.assertRaises(FileNotFoundError):
            stream.to_list()

    def test_intermediate_operations(self):
        self.assertListEqual([2, 4], SimpleStream.of(1, 2, 3, 4).filter(lambda i: i % 2 == 0).to_list())
        self.assertListEqual(['1', '2'], SimpleStream.of(1, 2).map(str).to_list())
        self.assertListEqual(['a', 'b', 'c', 'd'], SimpleStream.of('ab', 'cd').flat_map(list).to_list())
        self.assertListEqual([3, 1, 2], SimpleStream.of(3, 1, 3, 2, 1).distinct().to_list())
        self.assertListEqual([1, 2, 3], SimpleStream.of(3, 1, 2).sorted().to_list())
        self.assertListEqual([3, 4, 5], SimpleStream.of(1, 2, 3, 4, 5).skip(2).to_list())
        self.assertListEqual([1, 2], SimpleStream.of(1, 2, 3, 4, 5).limit(2).to_list())
        self.assertListEqual([], SimpleStream.of(1, 2).skip(5).to_list())

    def test_distinct_with_unhashable_items(self):
        self.assertListEqual([[1], [2]], SimpleStream.of([1], [2], [1]).distinct().to_list())

    def test_pagination(self):
        page = SimpleStream.from_iterable(range(100)).skip(20).limit(10).to_list()
        self.assertListEqual(list(range(20, 30)), page)

    def test_reverse_sort_is_stable(self):
        items = [('a', 1), ('b', 2), ('c', 1), ('d', 2)]
        result = SimpleStream(items).sorted(lambda item: item[1], reverse=True).to_list()
        self.assertListEqual([('b', 2), ('d', 2), ('a', 1), ('c', 1)], result)

    def test_negative_bounds(self):
        with self.assertRaises(ValueError):
            SimpleStream.of(1).skip(-1)

        with self.assertRaises(ValueError):
            SimpleStream.of(1).limit(-1)

    def test_laziness(self):
        pulled: List[int] = []

        stream = SimpleStream.of(1, 2, 3).peek(pulled.append).map(lambda i: i * 10)
        self.assertListEqual([], pulled, 'Nothing should be pulled before a terminal operation.')

        self.assertListEqual([10, 20, 30], stream.to_list())
        self.assertListEqual([1, 2, 3], pulled)

    def test_limit_on_infinite_stream(self):
        self.assertEqual(5, SimpleStream.iterate(0, lambda i: i + 1).limit(5).count())

    def test_short_circuiting(self):
        pulled: List[int] = []
        self.assertFalse(SimpleStream.of(1, 2, 3, 4).peek(pulled.append).all_match(lambda i: i < 2))
        self.assertListEqual([1, 2], pulled)

        pulled.clear()
        self.assertTrue(SimpleStream.of(1, 2, 3, 4).peek(pulled.append).any_match(lambda i: i == 3))
        self.assertListEqual([1, 2, 3], pulled)

        pulled.clear()
        self.assertFalse(SimpleStream.of(1, 2, 3, 4).peek(pulled.append).none_match(lambda i: i == 1))
        self.assertListEqual([1], pulled)

        pulled.clear()
        self.assertEqual(1, SimpleStream.of(1, 2, 3).peek(pulled.append).find_first())
        self.assertListEqual([1], pulled)

        # Works on an infinite stream, too.
        self.assertTrue(SimpleStream.iterate(0, lambda i: i + 1).any_match(lambda i: i > 100))

    def test_matching_on_empty_stream(self):
        self.assertTrue(SimpleStream.of().all_match(lambda i: False))
        self.assertFalse(SimpleStream.of().any_match(lambda i: True))
        self.assertTrue(SimpleStream.of().none_match(lambda i: True))
        self.assertIsNone(SimpleStream.of().find_first())
        self.assertIsNone(SimpleStream.of().find_any())

    def test_extremes_and_count(self):
        self.assertEqual(9, SimpleStream.of(3, 9, 1).max())
        self.assertEqual(1, SimpleStream.of(3, 9, 1).min())
        self.assertEqual('bb', SimpleStream.of('a', 'bb', 'cc').max(key=len))
        self.assertEqual('a', SimpleStream.of('a', 'b', 'cc').min(key=len))
        self.assertIsNone(SimpleStream.of().max())
        self.assertIsNone(SimpleStream.of().min())
        self.assertEqual(3, SimpleStream.of(3, 9, 1).count())
        self.assertEqual(0, SimpleStream.of().count())

    def test_collectors(self):
        words = ['apple', 'avocado', 'banana', 'blueberry', 'cherry']

        grouped = SimpleStream(words).group_by(lambda w: w[0])
        self.assertListEqual(['a', 'b', 'c'], list(grouped.keys()))
        self.assertListEqual(['banana', 'blueberry'], grouped['b'])

        partitioned = SimpleStream(words).partition_by(lambda w: len(w) > 6)
        self.assertListEqual(['avocado', 'blueberry'], partitioned[True])
        self.assertListEqual(['apple', 'banana', 'cherry'], partitioned[False])

        empty_partition = SimpleStream.of().partition_by(lambda w: True)
        self.assertDictEqual({False: [], True: []}, empty_partition)

        self.assertDictEqual({'apple': 5, 'banana': 6}, SimpleStream.of('apple', 'banana').to_map(lambda w: w, len))

        # The later item wins when two items share the same key.
        by_initial = SimpleStream.of('apple', 'banana', 'avocado').to_map(lambda w: w[0], lambda w: w)
        self.assertDictEqual({'a': 'avocado', 'b': 'banana'}, by_initial)

    def test_for_each_and_run(self):
        visited: List[int] = []
        SimpleStream.of(1, 2).for_each(visited.append)
        self.assertListEqual([1, 2], visited)

        visited.clear()
        SimpleStream.of(1, 2).peek(visited.append).run()
        self.assertListEqual([1, 2], visited)

        self.assertListEqual([1, 2], list(SimpleStream.of(1, 2).to_iter()))

    def test_single_use(self):
        stream = SimpleStream.of(1, 2, 3)
        stream.to_list()

        with self.assertRaises(StreamConsumedError):
            stream.count()

        with self.assertRaises(StreamConsumedError):
            stream.filter(lambda i: True)

    def test_single_use_after_to_iter(self):
        stream = SimpleStream.of(1, 2, 3)
        iterator = stream.to_iter()

        with self.assertRaises(StreamConsumedError):
            stream.count()

        # The iterator handed out first is still usable.
        self.assertListEqual([1, 2, 3], list(iterator))

        with self.assertRaises(StreamConsumedError):
            stream.to_iter()
