import io
import unittest
from contextlib import redirect_stdout

from fluentfp import Mapper, Left, Right, Some, Pair, lof, pair, zip_, zip_with, unzip2, unzip3, unzip4
from fluentfp.mapper import fold


class TestMapper(unittest.TestCase):
    def test_chain(self):
        m = Mapper.of(1, 2, 3).map(lambda x: x + 1).keep_if(lambda x: x % 2 == 0)
        self.assertEqual(m.to_list(), [2, 4])
        self.assertEqual(m.append(6).extend([8]).to_list(), [2, 4, 6, 8])
        self.assertEqual(Mapper.of(1, 2).map(str).to_list(), ["1", "2"])

    def test_remove_if(self):
        even = lambda x: x % 2 == 0
        self.assertEqual(Mapper.of(1, 2, 3, 4, 5).remove_if(even).to_list(), [1, 3, 5])
        self.assertEqual(Mapper.of(2, 4).remove_if(even).to_list(), [])
        self.assertEqual(Mapper.of().remove_if(even).to_list(), [])

    def test_take_first(self):
        m = Mapper.from_iterable(range(1, 6))
        self.assertEqual(m.take_first(3).to_list(), [1, 2, 3])
        self.assertEqual(m.take_first(10).to_list(), [1, 2, 3, 4, 5])
        self.assertEqual(m.take_first(-1).to_list(), [])

    def test_find_after_chain(self):
        got = Mapper.of(1, 2, 3, 4, 5, 6).keep_if(lambda n: n % 2 == 0).find(lambda n: n > 3)
        self.assertEqual(got, Some(4))
        self.assertTrue(Mapper.of(1).find(lambda n: n > 3).is_none())

    def test_index_where(self):
        self.assertEqual(Mapper.of(1, 2, 3, 2).index_where(lambda n: n == 2), Some(1))
        miss = Mapper.of(1, 2).index_where(lambda n: n < 0)
        self.assertEqual(miss.get(), (0, False))

    def test_any_contains_matches(self):
        m = Mapper.of("a", "b")
        self.assertTrue(m.any(lambda s: s == "b"))
        self.assertFalse(Mapper.of().any(lambda s: True))
        self.assertTrue(m.contains("a"))
        self.assertTrue(m.contains_any(["z", "b"]))
        self.assertFalse(m.contains_any([]))
        self.assertTrue(m.matches([]))
        self.assertFalse(m.matches(["z"]))

    def test_unique_and_set(self):
        m = Mapper.of("b", "a", "b", "c", "a")
        self.assertEqual(m.unique().to_list(), ["b", "a", "c"])
        self.assertEqual(m.to_set(), {"a", "b", "c"})

    def test_single(self):
        self.assertEqual(Mapper.of().single(), Left(0))
        self.assertEqual(Mapper.of(42).single(), Right(42))
        self.assertEqual(Mapper.of(1, 2, 3).single().get_left(), (3, True))

    def test_fold(self):
        self.assertEqual(Mapper.of(1, 2, 3).fold(0, lambda acc, x: acc + x), 6)
        self.assertEqual(fold([], "init", lambda acc, x: acc + x), "init")
        self.assertEqual(fold(["a", "b"], "", lambda acc, x: acc + x), "ab")

    def test_sort(self):
        m = Mapper.of(("b", 2), ("a", 3), ("c", 1))
        self.assertEqual([k for k, _ in m.sort_by(lambda p: p[1])], ["c", "b", "a"])
        self.assertEqual([k for k, _ in m.sort_by_desc(lambda p: p[0])], ["c", "b", "a"])
        self.assertEqual(m[0], ("b", 2))

    def test_each_and_flat_map(self):
        seen = []
        Mapper.of(1, 2).each(seen.append)
        self.assertEqual(seen, [1, 2])
        self.assertEqual(Mapper.of(1, 2).flat_map(lambda x: [x, x]).to_list(), [1, 1, 2, 2])
        self.assertEqual(Mapper.of(1, 2).convert(lambda x: -x).to_list(), [-1, -2])
        self.assertEqual(len(Mapper.of(1, 2)), 2)

    def test_unzip(self):
        rows = [{"n": "a", "v": 1, "w": True, "x": 0.5}, {"n": "b", "v": 2, "w": False, "x": 1.5}]
        names, vals = unzip2(rows, lambda r: r["n"], lambda r: r["v"])
        self.assertEqual((names.to_list(), vals.to_list()), (["a", "b"], [1, 2]))
        _, _, ws = unzip3(rows, lambda r: r["n"], lambda r: r["v"], lambda r: r["w"])
        self.assertEqual(ws.to_list(), [True, False])
        *_, xs = unzip4(rows, lambda r: r["n"], lambda r: r["v"], lambda r: r["w"], lambda r: r["x"])
        self.assertEqual(xs.to_list(), [0.5, 1.5])


class TestPair(unittest.TestCase):
    def test_zip(self):
        self.assertEqual(zip_([1, 2], ["a", "b"]), [Pair(1, "a"), Pair(2, "b")])
        self.assertEqual(pair.of(1, "a").v2, "a")
        with self.assertRaises(ValueError):
            zip_([1], [])

    def test_zip_with(self):
        self.assertEqual(zip_with([1, 2, 3], [10, 20, 30], lambda a, b: a + b), [11, 22, 33])
        self.assertEqual(zip_with([], [], lambda a, b: a + b), [])
        with self.assertRaises(ValueError):
            zip_with([1, 2], [1], lambda a, b: a)


class TestLof(unittest.TestCase):
    def test_helpers(self):
        self.assertEqual(Mapper.of([1], [1, 2]).map(lof.len_).to_list(), [1, 2])
        self.assertEqual(Mapper.of("ab", "").map(lof.string_len).to_list(), [2, 0])
        buf = io.StringIO()
        with redirect_stdout(buf):
            Mapper.of("x", "y").each(lof.println)
        self.assertEqual(buf.getvalue(), "x\ny\n")
