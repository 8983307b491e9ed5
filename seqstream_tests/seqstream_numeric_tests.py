import math
import numpy as np
import pandas as pd
import suite
from dgen import Generator
from seqstream import (
    of_ints, of_longs, of_floats, int_range, long_range, override,
    OptionalInt, OptionalFloat, OptionalLong, Sequence, StateError
)
from seqstream.sequence import NumericSequence

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- int sequences ---

@test("int count of the documented example")
def test_int_count():
    result = of_ints([-50, 20, 12, 4, -9]).count()
    assert_that(result == 5, f"count should be 5: {result}")


@test("int max and min return OptionalInt")
def test_int_max_min():
    maximum = of_ints([12, 55, 37, 9]).max()
    minimum = of_ints([12, 55, 37, 9]).min()
    assert_that(maximum == OptionalInt.of(55), f"max should be OptionalInt(55): {maximum}")
    assert_that(minimum == OptionalInt.of(9), f"min should be OptionalInt(9): {minimum}")
    assert_that(isinstance(maximum.get(), int), f"value should be a python int: {type(maximum.get())}")


@test("int matching on the documented example")
def test_int_matching():
    is_odd = lambda n: n % 2 == 1
    assert_that(of_ints([22, 55, 37, 19]).all_match(is_odd) is False, "all_match should be false")
    assert_that(of_ints([22, 55, 37, 19]).any_match(is_odd) is True, "any_match should be true")
    assert_that(of_ints([22, 55, 37, 19]).none_match(lambda n: n > 60) is True, "none_match should be true")


@test("int to_array returns an independent int32 array")
def test_int_to_array():
    source = [3, 1, 2]
    result = of_ints(source).to_array()
    assert_that(isinstance(result, np.ndarray), f"should be ndarray: {type(result)}")
    assert_that(result.dtype == np.int32, f"dtype should be int32: {result.dtype}")
    assert_that(result.tolist() == source, f"array data wrong: {result.tolist()}")
    result[0] = 99
    assert_that(source == [3, 1, 2], f"source changed: {source}")


@test("int to_array from a numpy source does not alias it")
def test_int_to_array_numpy_source():
    source = np.array([4, 5, 6], dtype=np.int32)
    result = of_ints(source).to_array()
    result[1] = -1
    assert_that(source.tolist() == [4, 5, 6], f"numpy source changed: {source}")


@test("int to_array with a generator")
def test_int_to_array_generator():
    result = of_ints([7, 8]).to_array(lambda n: np.zeros(n, dtype=np.int64))
    assert_that(result.dtype == np.int64, f"generator dtype should win: {result.dtype}")
    assert_that(result.tolist() == [7, 8], f"generator data wrong: {result.tolist()}")


@test("int sequences reject non-integers and bools")
def test_int_rejects_bad_elements():
    assert_raises(TypeError, lambda: of_ints([1, 2.5]).count())
    assert_raises(TypeError, lambda: of_ints([1, True]).to_array())
    assert_raises(TypeError, lambda: of_ints(['3']).max())


@test("int sequences enforce the 32-bit range")
def test_int_range_check():
    assert_raises(ValueError, lambda: of_ints([2 ** 31]).count())
    assert_raises(ValueError, lambda: of_ints([-2 ** 31 - 1]).count())
    assert_that(of_ints([2 ** 31 - 1, -2 ** 31]).count() == 2, "bounds themselves are valid")


@test("a failed validation still closes the sequence")
def test_validation_closes():
    sequence = of_ints([1, 'x'])
    assert_raises(TypeError, lambda: sequence.count())
    assert_raises(StateError, lambda: sequence.count())


@test("int_range produces a half open range")
def test_int_range_factory():
    assert_that(int_range(0, 5).to_array().tolist() == [0, 1, 2, 3, 4], "int_range data wrong")
    assert_that(int_range(3, 3).count() == 0, "empty range should count 0")


@test("numpy integer elements are accepted")
def test_numpy_elements():
    source = pd.Series([10, 40, 20])
    result = of_ints(source).max()
    assert_that(result == OptionalInt.of(40), f"series max wrong: {result}")


# --- long sequences ---

@test("long sequences hold values beyond the int range")
def test_long_values():
    big = 2 ** 40
    result = of_longs([1, big, -big]).max()
    assert_that(result == OptionalLong.of(big), f"long max wrong: {result}")
    array = long_range(0, 3).to_array()
    assert_that(array.dtype == np.int64, f"long dtype should be int64: {array.dtype}")


@test("long sequences enforce the 64-bit range")
def test_long_range_check():
    assert_raises(ValueError, lambda: of_longs([2 ** 63]).count())


@test("OptionalInt and OptionalLong never compare equal")
def test_optional_kinds_differ():
    assert_that(of_ints([1]).max() != of_longs([1]).max(), "different optional kinds should differ")


# --- float sequences ---

@test("empty float max is an empty OptionalFloat")
def test_float_empty_max():
    result = of_floats([]).max()
    assert_that(isinstance(result, OptionalFloat), f"should be OptionalFloat: {type(result)}")
    assert_that(result.is_empty(), "max of empty floats should be empty")


@test("float max and min widen integers")
def test_float_max_min():
    assert_that(of_floats([1, 2.5, -3]).max() == OptionalFloat.of(2.5), "float max wrong")
    result = of_floats([1, 2.5, -3]).min().get()
    assert_that(result == -3.0 and isinstance(result, float), f"float min wrong: {result!r}")


@test("NaN wins float max and min")
def test_float_nan():
    assert_that(math.isnan(of_floats([1.0, math.nan, 3.0]).max().get()), "max with NaN should be NaN")
    assert_that(math.isnan(of_floats([1.0, math.nan, 3.0]).min().get()), "min with NaN should be NaN")


@test("float sequences reject non-numbers")
def test_float_rejects():
    assert_raises(TypeError, lambda: of_floats([1.0, None]).count())
    assert_raises(TypeError, lambda: of_floats([False]).count())


@test("float to_pandas keeps the float64 dtype")
def test_float_to_pandas():
    series = of_floats([1, 2]).to_pandas()
    assert_that(series.dtype == np.float64, f"series dtype wrong: {series.dtype}")
    assert_that(series.tolist() == [1.0, 2.0], f"series data wrong: {series.tolist()}")


# --- numpy and pure python paths agree ---

@test("numpy and pure python max/min agree on random data")
def test_numpy_parity():
    gen = Generator(seed=42)
    ints = gen.integers(200, -1000, 1000)
    floats = gen.floats(200, -1e6, 1e6)

    with override(use_numpy=True):
        fast = (of_ints(ints).max(), of_ints(ints).min(), of_floats(floats).max(), of_floats(floats).min())
    with override(use_numpy=False):
        slow = (of_ints(ints).max(), of_ints(ints).min(), of_floats(floats).max(), of_floats(floats).min())

    assert_that(fast == slow, f"paths disagree: {fast} vs {slow}")
    assert_that(fast[0].get() == max(ints), "int max wrong")
    assert_that(fast[3].get() == min(floats), "float min wrong")


@test("both paths order -0.0 below 0.0")
def test_signed_zero_parity():
    def signs(flag):
        with override(use_numpy=flag):
            high = of_floats([-0.0, 0.0]).max().get()
            low = of_floats([0.0, -0.0]).min().get()
        return math.copysign(1.0, high), math.copysign(1.0, low)

    assert_that(signs(True) == (1.0, -1.0), f"numpy signed zero wrong: {signs(True)}")
    assert_that(signs(False) == (1.0, -1.0), f"pure python signed zero wrong: {signs(False)}")


@test("float sequences reject integers too large for a double")
def test_float_overflow():
    sequence = of_floats([1, 10 ** 400])
    assert_raises(ValueError, lambda: sequence.count())
    assert_that(sequence.is_closed, "sequence should be closed")


@test("the numeric base class cannot be built directly")
def test_numeric_base_abstract():
    assert_raises(TypeError, lambda: NumericSequence(lambda: [1]))


@test("pure python path handles NaN like numpy")
def test_python_path_nan():
    with override(use_numpy=False):
        result = of_floats([math.nan, 2.0]).max()
    assert_that(math.isnan(result.get()), f"pure python max with NaN should be NaN: {result}")


# --- boxed ---

@test("boxed hands elements to a generic sequence")
def test_boxed():
    numbers = of_ints([4, 2, 9])
    boxed = numbers.boxed()
    assert_that(isinstance(boxed, Sequence), f"boxed should be a Sequence: {type(boxed)}")
    assert_that(numbers.is_closed, "the numeric sequence should be consumed")
    assert_that(boxed.to_array() == [4, 2, 9], "boxed data wrong")


@test("boxed sequences still validate lazily")
def test_boxed_validates():
    boxed = of_ints([1, 'two']).boxed()
    assert_raises(TypeError, lambda: boxed.to_list())


if __name__ == "__main__":
    suite.main(title="seqstream numeric sequence test")
