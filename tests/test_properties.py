import unittest

from hypothesis import given, settings
from hypothesis import strategies as st

from failchain import (
    Success, success, fail, flatten, flatten_k, map2,
    Result, Ok, from_errors, to_validation,
    Option, Some, NONE,
)

values = st.one_of(st.integers(), st.text(max_size=10))
failures = st.text(max_size=5)
errors_chains = st.lists(failures, min_size=1, max_size=8).map(from_errors)
fail_chains = errors_chains.map(to_validation)
validations = st.one_of(values.map(success), fail_chains)
results = st.one_of(values.map(Ok), errors_chains)
options = st.one_of(values.map(Some), st.just(NONE))
short_validations = st.one_of(
    st.integers().map(success),
    st.lists(failures, min_size=1, max_size=2).map(from_errors).map(to_validation),
)


def identity(x):
    return x


def f(x):
    return x + 6


def g(y):
    return y * y


def never(_):
    raise AssertionError("should not run")


def halve(x):
    return success(x // 2) if x % 2 == 0 else fail(f"odd: {x}")


class TestValidationProperties(unittest.TestCase):
    @given(validations)
    @settings(max_examples=100, deadline=None)
    def test_functor_identity(self, v):
        self.assertEqual(v.map(identity), v)

    @given(st.one_of(st.integers().map(success), fail_chains))
    @settings(max_examples=100, deadline=None)
    def test_functor_composition(self, v):
        self.assertEqual(v.map(f).map(g), v.map(lambda x: g(f(x))))

    @given(st.integers())
    @settings(max_examples=100, deadline=None)
    def test_monad_left_identity(self, x):
        self.assertEqual(success(x).flat_map(halve), halve(x))

    @given(validations)
    @settings(max_examples=100, deadline=None)
    def test_monad_right_identity(self, v):
        self.assertEqual(v.flat_map(success), v)

    @given(fail_chains)
    @settings(max_examples=100, deadline=None)
    def test_flat_map_short_circuits(self, v):
        self.assertIs(v.flat_map(never), v)
        self.assertIs(v.map(never), v)

    @given(failures, failures)
    @settings(max_examples=50, deadline=None)
    def test_map2_accumulates_in_argument_order(self, a, b):
        self.assertEqual(map2(fail(a), fail(b), never).failures(), [a, b])

    @given(st.lists(short_validations, max_size=10))
    @settings(max_examples=100, deadline=None)
    def test_flatten_keeps_every_failure(self, items):
        out = flatten(items)
        expected = [x for v in items if v.is_fail() for x in v.failures()]
        if expected:
            self.assertEqual(out.failures(), expected)
        else:
            self.assertEqual(out, Success(tuple(v.get() for v in items)))

    @given(st.lists(failures, min_size=1, max_size=20))
    @settings(max_examples=100, deadline=None)
    def test_result_round_trip(self, errs):
        r = from_errors(errs)
        v = to_validation(r)
        self.assertEqual(v.failures(), errs)
        self.assertEqual(v.to_result(), r)

    @given(fail_chains)
    @settings(max_examples=50, deadline=None)
    def test_map_all_failures_collapses(self, v):
        out = v.map_all_failures(tuple)
        self.assertEqual(out.failures(), [tuple(v.failures())])
        self.assertIsNone(out.previous)


class TestResultProperties(unittest.TestCase):
    @given(results)
    @settings(max_examples=100, deadline=None)
    def test_functor_identity(self, r):
        self.assertEqual(r.map(identity), r)

    @given(st.one_of(st.integers().map(Ok), errors_chains))
    @settings(max_examples=100, deadline=None)
    def test_functor_composition(self, r):
        self.assertEqual(r.map(f).map(g), r.map(lambda x: g(f(x))))

    @given(st.integers())
    @settings(max_examples=100, deadline=None)
    def test_monad_left_identity(self, x):
        k = lambda y: Ok(y - 1) if y > 0 else from_errors([y])
        self.assertEqual(Result.pure(x).and_then(k), k(x))

    @given(errors_chains)
    @settings(max_examples=100, deadline=None)
    def test_and_then_short_circuits(self, r):
        self.assertIs(r.and_then(never), r)

    @given(st.lists(st.one_of(st.integers().map(Ok), st.lists(failures, min_size=1, max_size=2).map(from_errors)), max_size=10))
    @settings(max_examples=100, deadline=None)
    def test_generic_flatten_keeps_every_error(self, items):
        out = flatten_k(items, Result.pure)
        expected = [e for r in items if r.is_err() for e in r.errors()]
        if expected:
            self.assertEqual(out.errors(), expected)
        else:
            self.assertEqual(out, Ok(tuple(r.value for r in items)))


class TestOptionProperties(unittest.TestCase):
    @given(options)
    @settings(max_examples=100, deadline=None)
    def test_functor_identity(self, o):
        self.assertEqual(o.map_k(identity), o)

    @given(st.one_of(st.integers().map(Some), st.just(NONE)))
    @settings(max_examples=100, deadline=None)
    def test_functor_composition(self, o):
        self.assertEqual(o.map_k(f).map_k(g), o.map_k(lambda x: g(f(x))))

    @given(st.integers())
    @settings(max_examples=100, deadline=None)
    def test_monad_left_identity(self, x):
        k = lambda y: Some(y) if y % 3 else NONE
        self.assertEqual(Option.pure(x).flat_map_k(k), k(x))

    @given(st.lists(options, max_size=10))
    @settings(max_examples=100, deadline=None)
    def test_generic_flatten(self, items):
        out = flatten_k(items, Option.pure)
        if any(o.is_none() for o in items):
            self.assertIs(out, NONE)
        else:
            self.assertEqual(out, Some(tuple(o.value for o in items)))
