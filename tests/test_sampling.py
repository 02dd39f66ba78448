"""
Module: test_sampling.py

Author: Michael Economou
Date: 2026-10-18

Tests for time sampling of async streams.
"""

import asyncio

import pytest

from colorpick.utils.flow import FiniteSharedStream, sample


async def timed(values, delay, error=None):
    for value in values:
        await asyncio.sleep(delay)
        yield value
    if error is not None:
        raise error


async def collect(iterator):
    return [value async for value in iterator]


def is_subsequence(candidate, sequence):
    remaining = iter(sequence)
    return all(value in remaining for value in candidate)


class TestSample:
    """Last value per window wins, the final value is never lost."""

    def test_sampled_is_strict_subsequence_ending_in_last_value(self):
        emitted = [0, 10, 55, 100]

        sampled = asyncio.run(collect(sample(timed(emitted, 0.05), 0.2)))

        assert sampled[-1] == 100
        assert is_subsequence(sampled, emitted)
        assert len(sampled) < len(emitted)

    def test_fast_source_completing_before_first_tick(self):
        sampled = asyncio.run(collect(sample(timed([1, 2, 3], 0.0), 0.05)))
        assert sampled == [3]

    def test_slow_source_delivers_every_value(self):
        emitted = [1, 2, 3]
        sampled = asyncio.run(collect(sample(timed(emitted, 0.06), 0.01)))
        assert sampled == emitted

    def test_empty_source(self):
        sampled = asyncio.run(collect(sample(timed([], 0.0), 0.01)))
        assert sampled == []

    def test_error_raised_after_pending_value(self):
        received = []

        async def scenario():
            async for value in sample(timed([5, 7], 0.0, RuntimeError("boom")), 0.01):
                received.append(value)

        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(scenario())
        assert received == [7]

    def test_final_value_kept_when_consumer_is_slow(self):
        seen = []

        async def scenario():
            async for value in sample(timed([10, 100], 0.05), 0.06):
                seen.append(value)
                # Source finishes while the sampler is suspended here
                await asyncio.sleep(0.1)

        asyncio.run(scenario())

        assert seen == [10, 100]

    def test_invalid_interval(self):
        async def scenario():
            async for _ in sample(timed([1], 0.0), 0):
                pass

        with pytest.raises(ValueError):
            asyncio.run(scenario())

    def test_two_cadences_over_one_shared_stream(self):
        emitted = [0, 10, 55, 100]
        runs = []

        async def source():
            runs.append(1)
            async for value in timed(emitted, 0.05):
                yield value

        async def scenario():
            async with FiniteSharedStream(source()) as stream:
                return await asyncio.gather(
                    collect(stream.subscribe()),
                    collect(sample(stream.subscribe(), 0.2)),
                )

        instant, sampled = asyncio.run(scenario())

        assert runs == [1]
        assert instant == emitted
        assert sampled[-1] == 100
        assert is_subsequence(sampled, emitted)
        assert len(sampled) < len(emitted)
