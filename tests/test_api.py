import math

import numpy as np
import pytest

import biserial
from biserial.api import (
    PointBiserialConfig,
    point_biserial,
    point_biserial_outcome,
    point_biserial_test,
)
from biserial.core.errors import InvalidArgumentError, TypeMismatchError


class TestCallShapes:
    """Two and three positional arguments are the only valid shapes."""

    def test_two_arguments_default_to_unbiased(self):
        assert point_biserial([1, 2, 3], [4, 5, 6]) == point_biserial(
            [1, 2, 3], [4, 5, 6], "unbiased"
        )

    def test_three_arguments(self):
        assert point_biserial((1, 2, 3), (4, 5, 6), "biased") == pytest.approx(
            -0.9486833, abs=1e-7
        )

    @pytest.mark.parametrize("args", [(), ([1],), ([1], [2], "biased", "extra")])
    def test_wrong_arity(self, args):
        with pytest.raises(TypeMismatchError, match="argument"):
            point_biserial(*args)

    def test_normalization_as_keyword(self):
        assert point_biserial([1, 2, 3], [4, 5, 6], normalization="biased") == (
            point_biserial([1, 2, 3], [4, 5, 6], "biased")
        )
        outcome = point_biserial_outcome([1, 2], [3, 4], normalization="uncorrected")
        assert outcome.normalization == "uncorrected"

    def test_missing_second_sample_by_keyword(self):
        with pytest.raises(TypeMismatchError, match="fewer than two"):
            point_biserial(sample_a=[1, 2])

    def test_package_level_export(self):
        assert biserial.point_biserial([1, 2, 3], [4, 5, 6]) == pytest.approx(
            -0.8017837, abs=1e-7
        )


class TestArgumentTypes:
    """Type checks happen before any numeric work."""

    @pytest.mark.parametrize(
        "sample",
        ["123", {1, 2, 3}, 3.0, None, np.array([[1.0, 2.0]]), np.array(["a", "b"])],
    )
    def test_non_sequence_samples(self, sample):
        with pytest.raises(TypeMismatchError):
            point_biserial(sample, [1, 2])
        with pytest.raises(TypeMismatchError):
            point_biserial([1, 2], sample)

    @pytest.mark.parametrize("item", ["1", None, True, 1 + 2j])
    def test_non_real_items(self, item):
        with pytest.raises(TypeMismatchError, match="real numbers"):
            point_biserial([1.0, item], [2.0, 3.0])

    def test_boolean_array_rejected(self):
        with pytest.raises(TypeMismatchError):
            point_biserial(np.array([True, False]), [1.0])

    def test_numpy_scalars_accepted(self):
        r = point_biserial([np.float64(1.0), np.int64(2)], np.array([3, 4]))
        assert r == pytest.approx(point_biserial([1, 2], [3, 4]))

    def test_huge_integers_give_nan_not_overflow(self):
        assert math.isnan(point_biserial([10**400, 1], [2, 3]))
        outcome = point_biserial_outcome([1, 2], [3, -(10**400)], "biased")
        assert outcome.reason == "non_finite"

    def test_normalization_must_be_string(self):
        with pytest.raises(TypeMismatchError, match="normalization"):
            point_biserial([1, 2], [3, 4], 1)

    def test_normalization_enum_accepted(self):
        assert point_biserial(
            [1, 2], [3, 4], biserial.Normalization.UNCORRECTED
        ) == point_biserial([1, 2], [3, 4], "uncorrected")

    def test_unknown_normalization(self):
        with pytest.raises(InvalidArgumentError):
            point_biserial([1, 2], [3, 4], "population")

    @pytest.mark.parametrize("extra", [(), ("unbiased",), ("biased",)])
    def test_empty_samples(self, extra):
        with pytest.raises(InvalidArgumentError, match="one or more items"):
            point_biserial([], [1, 2], *extra)
        with pytest.raises(InvalidArgumentError, match="one or more items"):
            point_biserial(np.array([]), [1, 2], *extra)


class TestOutcomeAndTest:
    def test_degenerate_input_returns_nan(self):
        assert math.isnan(point_biserial([5], [5]))
        outcome = point_biserial_outcome([5], [5], "unbiased")
        assert outcome.reason == "zero_std"

    def test_default_config(self):
        result = point_biserial_test([1, 2, 3, 4], [5, 6, 7, 9])
        assert result.alternative == "two-sided"
        assert 0.0 < result.pvalue < 0.05

    def test_config_alternative(self):
        config = PointBiserialConfig(alternative="greater")
        result = point_biserial_test([1, 2, 3, 4], [5, 6, 7, 9], config=config)
        assert result.alternative == "greater"
        assert result.pvalue > 0.5

    def test_config_normalization_sets_reported_coefficient(self):
        a, b = [1, 2, 3, 4], [5, 6, 7, 9]
        biased = point_biserial_test(a, b, PointBiserialConfig(normalization="biased"))
        unbiased = point_biserial_test(
            a, b, PointBiserialConfig(normalization="unbiased")
        )
        assert biased != unbiased
        assert biased.coefficient == pytest.approx(point_biserial(a, b, "biased"))
        assert unbiased.coefficient == pytest.approx(point_biserial(a, b))
        assert abs(biased.coefficient) > abs(unbiased.coefficient)
        assert biased.pvalue == unbiased.pvalue

    def test_test_validates_samples(self):
        with pytest.raises(InvalidArgumentError):
            point_biserial_test([], [1, 2])
        with pytest.raises(TypeMismatchError):
            point_biserial_test("abc", [1, 2])


class TestConfig:
    def test_defaults_validate(self):
        config = PointBiserialConfig()
        config.validate()
        assert config.normalization == "unbiased"

    @pytest.mark.parametrize(
        "kwargs",
        [{"normalization": "population"}, {"alternative": "both"}],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(InvalidArgumentError):
            PointBiserialConfig(**kwargs).validate()
