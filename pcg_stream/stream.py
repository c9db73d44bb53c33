"""Output driver: seed once, then stream PCG32 words to stdout until stopped."""

import argparse
import os
import signal
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, TextIO

from .prng import MASK32, PCG32
from .seeding import SeedSource, TimeSeededSource

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def format_output(value: int) -> str:
    return f"0x{value & MASK32:08x}"


def parse_output(line: str) -> int:
    """Read back one emitted line (``0x``-prefixed hex or plain decimal).

    For consumers of the stream; the driver itself only writes.
    """

    try:
        value = int(line.strip(), 0)
    except ValueError as exc:
        raise ValueError(f"Not a generator output: {line!r}.") from exc

    if not 0 <= value <= MASK32:
        raise ValueError(f"Output {line.strip()!r} does not fit in 32 bits.")
    return value


class StopRequested(Exception):
    """Raised from a signal handler so a write blocked on a full pipe is abandoned."""


@dataclass
class StopFlag:
    """Cancellation flag checked by the stream between outputs."""

    requested: bool = False

    def request(self, *_: object) -> None:
        self.requested = True


def iter_outputs(
    rng: PCG32,
    stop: Optional[StopFlag] = None,
    limit: Optional[int] = None,
) -> Iterator[int]:
    """Lazy output sequence; infinite unless ``stop`` is raised or ``limit`` hit."""

    produced = 0
    while limit is None or produced < limit:
        if stop is not None and stop.requested:
            return
        yield rng.next_u32()
        produced += 1


def emit(
    rng: PCG32,
    out: TextIO,
    stop: Optional[StopFlag] = None,
    limit: Optional[int] = None,
) -> int:
    written = 0
    for value in iter_outputs(rng, stop=stop, limit=limit):
        out.write(format_output(value) + "\n")
        written += 1
    return written


def run(
    seed_source: Optional[SeedSource] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    stop: Optional[StopFlag] = None,
    limit: Optional[int] = None,
) -> int:
    """Seed a generator, report its seed words on ``stderr`` and stream to ``stdout``."""

    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    if seed_source is None:
        seed_source = TimeSeededSource()

    rng = PCG32.from_seed_source(seed_source)
    for line in rng.describe():
        print(line, file=stderr)
    stderr.flush()

    emit(rng, stdout, stop=stop, limit=limit)
    stdout.flush()
    return 0


@contextmanager
def stop_on_signals(stop: StopFlag, signals: Sequence[int] = STOP_SIGNALS) -> Iterator[StopFlag]:
    """Route ``signals`` to ``stop`` for the duration of the block.

    The handler raises :class:`StopRequested` after flagging, otherwise a write
    blocked on a stalled consumer would be retried and never return.
    """

    def _interrupt(signum: int, frame: object) -> None:
        stop.request()
        raise StopRequested(signum)

    previous = {signum: signal.signal(signum, _interrupt) for signum in signals}
    try:
        yield stop
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def _discard_stdout() -> None:
    # Point fd 1 at devnull so the interpreter's final flush cannot fail or block.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        description=(
            "Stream PCG32 output words to stdout, one 0x-prefixed line each, until "
            "interrupted. The seed words are reported on stderr."
        )
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    build_parser().parse_args(argv)

    try:
        with stop_on_signals(StopFlag()) as stop:
            return run(stop=stop)
    except StopRequested:
        # Buffered output is dropped; flushing it could block again.
        _discard_stdout()
        return 0
    except BrokenPipeError:
        _discard_stdout()
        return 1


if __name__ == "__main__":
    sys.exit(main())
