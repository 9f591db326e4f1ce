"""Test doubles shared by several test modules."""


class FixedRandom:
    """
    A stand-in random source: random() always returns `value`, uniform()
    replays the given draws and then falls back to the range midpoint.
    """

    def __init__(self, value=0.5, uniforms=()):
        self.value = value
        self.uniforms = list(uniforms)

    def random(self):
        return self.value

    def uniform(self, a, b):
        if self.uniforms:
            return self.uniforms.pop(0)
        return (a + b) / 2


class NoRandom:
    """A random source that fails the test if anything draws from it."""

    def random(self):
        raise AssertionError("unexpected random draw")

    def uniform(self, a, b):
        raise AssertionError("unexpected random draw")
