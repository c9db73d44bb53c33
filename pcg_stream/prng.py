# Minimal PCG32 (XSH RR) generator, no external deps
# Reference: pcg-random.org "really minimal" C implementation
from dataclasses import dataclass, field
from typing import Callable, Iterator, List

MULTIPLIER = 6364136223846793005
MASK64 = (1 << 64) - 1
MASK32 = (1 << 32) - 1


def xsh_rr(old: int) -> int:
    """XSH RR output permutation: xorshift high bits, then rotate by the top 5."""
    xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
    rot = (old >> 59) & 31
    return (xorshifted >> rot) | ((xorshifted << ((-rot) & 31)) & MASK32)


def invert_xsh_rr(rotation: int, output: int) -> int:
    """Recover bits 27..63 of the state that produced ``output``.

    Analysis helper for consumers of the stream; the generator never calls it.

    ``rotation`` is a guess for the top five state bits. When it is right, the
    result equals the true state with its low 27 bits cleared; those bits are
    never observable through a single output.
    """

    if not 0 <= rotation < 32:
        raise ValueError(f"Rotation must be in [0, 32), received {rotation}.")
    if not 0 <= output <= MASK32:
        raise ValueError(f"Output must be a 32-bit value, received {output:#x}.")

    state = rotation << 59
    # undo the rotation to get the xorshifted word back (state bits 27..58)
    recovered = ((output << rotation) | (output >> ((-rotation) & 31))) & MASK32

    # bits 46..58 were xored with zeros
    state |= (recovered >> 19) << 46
    # bits 28..45 were xored with bits 46..63, which are known by now
    state |= (((recovered >> 1) ^ (state >> 46)) & 0x3FFFF) << 28
    state |= ((recovered ^ (state >> 45)) & 1) << 27
    return state


@dataclass
class PCG32:
    state: int
    increment: int = 1442695040888963407  # default stream
    initial_state: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.state &= MASK64
        self.increment &= MASK64
        self.initial_state = self.state

    @classmethod
    def from_seed_source(cls, source: Callable[[], int]) -> "PCG32":
        """Draw ``state`` then ``increment`` from ``source``."""
        state = source()
        increment = source()
        return cls(state, increment)

    def next_u32(self) -> int:
        oldstate = self.state
        # increment is kept as drawn; oddness is forced here on every step
        self.state = (oldstate * MULTIPLIER + (self.increment | 1)) & MASK64
        return xsh_rr(oldstate)

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next_u32()

    def describe(self) -> List[str]:
        """Seed words as given at construction, however far the state has moved."""
        return [
            f">> PCG INITIAL STATE = {self.initial_state:016x}",
            f">> PCG INCREMENT     = {self.increment:016x}",
        ]
