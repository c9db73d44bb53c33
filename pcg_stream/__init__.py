"""Public package surface for the PCG32 output stream."""

from .prng import PCG32, invert_xsh_rr, xsh_rr
from .seeding import TimeSeededSource, entropy_seed_source, pack_chunks
from .stream import StopFlag, StopRequested, emit, format_output, iter_outputs, parse_output, run

__all__ = [
    "PCG32",
    "StopFlag",
    "StopRequested",
    "TimeSeededSource",
    "emit",
    "entropy_seed_source",
    "format_output",
    "invert_xsh_rr",
    "iter_outputs",
    "pack_chunks",
    "parse_output",
    "run",
    "xsh_rr",
]
