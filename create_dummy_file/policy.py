"""Fill policies: what data goes into the dummy file."""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass


class FillPolicy(ABC):
    """Base class for fill policies."""

    @property
    @abstractmethod
    def is_random(self) -> bool:
        """True if output bytes are drawn from a random generator."""

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable summary, used in log messages."""


class PatternPolicy(FillPolicy):
    """A policy that repeats a fixed, non-empty byte pattern."""

    @property
    def is_random(self) -> bool:
        return False

    @property
    @abstractmethod
    def pattern(self) -> bytes:
        """The bytes repeated cyclically across the file."""

    def describe(self) -> str:
        return f"pattern {self.pattern.hex(' ')} ({len(self.pattern)} bytes)"


class RandomPolicy(FillPolicy):
    """A policy that draws every byte independently from a random generator."""

    @property
    def is_random(self) -> bool:
        return True

    @abstractmethod
    def draw(self, rng: random.Random, size: int) -> bytes:
        """Return ``size`` freshly drawn bytes."""


@dataclass(frozen=True)
class Zeros(PatternPolicy):
    @property
    def pattern(self) -> bytes:
        return b"\x00"

    def describe(self) -> str:
        return "all zeros"


@dataclass(frozen=True)
class Ones(PatternPolicy):
    @property
    def pattern(self) -> bytes:
        return b"\xff"

    def describe(self) -> str:
        return "all ones"


@dataclass(frozen=True)
class RepeatingPattern(PatternPolicy):
    data: bytes

    def __post_init__(self) -> None:
        if not self.data:
            raise ValueError("Repeating pattern must have at least one byte")

    @property
    def pattern(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class UniformRandom(RandomPolicy):
    def draw(self, rng: random.Random, size: int) -> bytes:
        return rng.randbytes(size)

    def describe(self) -> str:
        return "uniform random bytes"


@dataclass(frozen=True)
class RandomFromSet(RandomPolicy):
    """Each byte is picked by a uniform random index into ``choices``.

    Repeated values in ``choices`` act as weights: "30,30,31" gives twice as
    many 0x30 bytes as 0x31 bytes.
    """

    choices: bytes

    def __post_init__(self) -> None:
        if len(self.choices) < 2:
            raise ValueError("Random selection needs at least two bytes")

    def draw(self, rng: random.Random, size: int) -> bytes:
        count = len(self.choices)
        if count > 256:
            return bytes(rng.choices(self.choices, k=size))

        # Random bytes index the choices; values at or above the largest
        # multiple of count are dropped so every index stays equally likely.
        limit = 256 - 256 % count
        table = bytes(self.choices[b % count] for b in range(256))
        rejected = bytes(range(limit, 256))
        result = bytearray()
        while len(result) < size:
            result += rng.randbytes(size - len(result)).translate(table, rejected)
        return bytes(result)

    def describe(self) -> str:
        return f"random selection from {self.choices.hex(' ')}"


DEFAULT_POLICY: FillPolicy = UniformRandom()


def resolve_random(choices: bytes) -> FillPolicy:
    """Pick the policy for a random request with optional candidate bytes.

    No bytes means uniform random data. A single byte is not random at all and
    fills the file with that byte. Two or more bytes select randomly among them.
    """
    if not choices:
        return UniformRandom()
    if len(choices) == 1:
        return RepeatingPattern(choices)
    return RandomFromSet(choices)
