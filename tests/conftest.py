"""Pytest configuration for path tracer tests.

Provides seeded generators and a scripted generator stub so that stochastic
materials and the renderer can be tested deterministically.
"""

import numpy as np
import pytest


class ScriptedRng:
    """Generator stand-in replaying fixed draws.

    uniform() and random() pop from their own queues and fall back to a
    constant once a queue is exhausted; integers() always returns its lower
    bound.
    """

    def __init__(self, uniforms=(), randoms=(), default=0.5):
        self._uniforms = list(uniforms)
        self._randoms = list(randoms)
        self._default = default

    def uniform(self, low=0.0, high=1.0):
        if self._uniforms:
            return self._uniforms.pop(0)
        return low + (high - low) * self._default

    def random(self):
        if self._randoms:
            return self._randoms.pop(0)
        return self._default

    def integers(self, low, high=None):
        return low


@pytest.fixture
def rng():
    """A seeded numpy generator, fresh for every test."""
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng
