from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import count, islice

import numpy as np
import pytest

from pysatl_precise.distributions.sampling import (
    ArraySample,
    CallableSampler,
    InverseTransformSampler,
    Sampler,
    samples,
)


def _counting_sampler() -> CallableSampler[int]:
    counter = count()
    return CallableSampler(lambda: next(counter))


class TestSamplers:
    def test_callable_sampler(self) -> None:
        sampler = _counting_sampler()
        assert isinstance(sampler, Sampler)
        assert [sampler.sample() for _ in range(3)] == [0, 1, 2]

    def test_inverse_transform_sampler_maps_uniform_deviates(self) -> None:
        expected = np.random.default_rng(11).random(5)
        sampler = InverseTransformSampler(lambda u: 2.0 * u, np.random.default_rng(11))

        drawn = [sampler.sample() for _ in range(5)]

        np.testing.assert_allclose(drawn, 2.0 * expected)
        assert isinstance(sampler, Sampler)


class TestSamples:
    def test_finite_stream(self) -> None:
        assert list(samples(_counting_sampler(), 4)) == [0, 1, 2, 3]

    def test_empty_stream(self) -> None:
        assert list(samples(_counting_sampler(), 0)) == []

    def test_unbounded_stream(self) -> None:
        assert list(islice(samples(_counting_sampler()), 1000, 1003)) == [1000, 1001, 1002]

    def test_negative_size_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid stream size"):
            samples(_counting_sampler(), -1)

    def test_streams_restart_from_current_sampler_state(self) -> None:
        sampler = _counting_sampler()
        first = samples(sampler, 2)
        second = samples(sampler, 2)

        assert list(first) == [0, 1]
        assert list(second) == [2, 3]

    def test_streams_are_lazy(self) -> None:
        sampler = _counting_sampler()
        stream = samples(sampler, 10)
        assert sampler.sample() == 0
        assert next(stream) == 1


class TestArraySample:
    def test_from_sampler(self) -> None:
        sample = ArraySample.from_sampler(_counting_sampler(), 3)

        assert sample.shape == (3, 1)
        assert len(sample) == 3
        assert sample.dimension == 1
        np.testing.assert_array_equal(sample.array, np.array([[0.0], [1.0], [2.0]]))
        assert [row.tolist() for row in sample] == [[0.0], [1.0], [2.0]]

    def test_empty(self) -> None:
        sample = ArraySample.from_sampler(_counting_sampler(), 0)
        assert sample.shape == (0, 1)

    def test_requires_two_dimensions(self) -> None:
        with pytest.raises(ValueError, match="2D"):
            ArraySample(np.zeros(3))
