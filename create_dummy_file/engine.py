"""Buffered fill-and-write engine."""

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from .errors import FillIOError
from .policy import FillPolicy, PatternPolicy, RandomPolicy

# Bytes handed to the sink per write call (256 KiB)
CHUNK_SIZE = 0x40000


@dataclass
class WriteProgress:
    """Running state of one fill call."""

    target_size: int
    bytes_written: int = 0
    pattern_offset: int = 0  # phase into the repeating pattern

    @property
    def remaining(self) -> int:
        return self.target_size - self.bytes_written


ProgressCallback = Callable[[WriteProgress], None]


def build_pattern_buffer(pattern: bytes, chunk_size: int) -> bytes:
    """Return ``chunk_size + len(pattern)`` bytes of ``pattern`` repeated.

    Any ``chunk_size`` slice starting inside the first copy of the pattern
    continues the pattern without a seam.
    """
    length = chunk_size + len(pattern)
    copies = -(-length // len(pattern))
    return (pattern * copies)[:length]


def _write(sink: BinaryIO, data: memoryview | bytes) -> None:
    # Raw (unbuffered) sinks may accept fewer bytes than offered
    view = memoryview(data)
    while view:
        written = sink.write(view)
        if written is None:
            raise BlockingIOError("Output sink would block")
        view = view[written:]


def _fill_pattern(sink: BinaryIO, progress: WriteProgress, policy: PatternPolicy, chunk_size: int, on_chunk: ProgressCallback | None) -> None:
    pattern_length = len(policy.pattern)
    buffer = memoryview(build_pattern_buffer(policy.pattern, chunk_size))
    logging.debug(f"Pattern buffer: {len(buffer)} bytes for {policy.describe()}")

    while progress.bytes_written < progress.target_size:
        offset = progress.bytes_written % pattern_length
        this_chunk = min(progress.remaining, chunk_size)
        _write(sink, buffer[offset : offset + this_chunk])
        progress.bytes_written += this_chunk
        progress.pattern_offset = progress.bytes_written % pattern_length
        if on_chunk is not None:
            on_chunk(progress)


def _fill_random(sink: BinaryIO, progress: WriteProgress, policy: RandomPolicy, chunk_size: int, rng: random.Random, on_chunk: ProgressCallback | None) -> None:
    logging.debug(f"Random buffer: {chunk_size} bytes for {policy.describe()}")

    while progress.bytes_written < progress.target_size:
        # Regenerate the whole buffer even if only part of it is written
        buffer = policy.draw(rng, chunk_size)
        this_chunk = min(progress.remaining, chunk_size)
        _write(sink, memoryview(buffer)[:this_chunk])
        progress.bytes_written += this_chunk
        if on_chunk is not None:
            on_chunk(progress)


def fill(
    sink: BinaryIO,
    target_size: int,
    policy: FillPolicy,
    *,
    chunk_size: int = CHUNK_SIZE,
    rng: random.Random | None = None,
    progress: ProgressCallback | None = None,
) -> int:
    """Write exactly ``target_size`` bytes chosen by ``policy`` to ``sink``.

    Memory use is bounded by ``chunk_size`` plus the pattern length, whatever
    the target size. Pattern policies produce the same bytes on every run;
    random policies use ``rng`` (a fresh unseeded generator by default).

    Returns the number of bytes written. OSError from the sink propagates
    unchanged, leaving whatever was already written in place.
    """
    if target_size < 0:
        raise ValueError(f"target size must not be negative: {target_size}")
    if chunk_size <= 0:
        raise ValueError(f"chunk size must be positive: {chunk_size}")

    state = WriteProgress(target_size=target_size)
    if isinstance(policy, PatternPolicy):
        _fill_pattern(sink, state, policy, chunk_size, progress)
    elif isinstance(policy, RandomPolicy):
        _fill_random(sink, state, policy, chunk_size, rng or random.Random(), progress)
    else:
        raise TypeError(f"Unsupported fill policy: {policy!r}")
    return state.bytes_written


def create_dummy_file(path: Path | str, target_size: int, policy: FillPolicy, **kwargs) -> int:
    """Create (or truncate) ``path`` and fill it with ``target_size`` bytes.

    Keyword arguments are passed to fill(). Any failure to create, write or
    close the file raises FillIOError; a partly written file is not removed.
    """
    path = Path(path)
    started = time.monotonic()
    try:
        with path.open("wb") as out:
            written = fill(out, target_size, policy, **kwargs)
    except OSError as e:
        raise FillIOError(path, e) from e

    elapsed = time.monotonic() - started
    logging.debug(f"Wrote {written} bytes to {path} in {elapsed:.3f}s")
    return written
