from dataclasses import dataclass

A = 16807
M = 0x7FFFFFFF  # 2^31-1

def pm_next(state: int) -> int:
    return (state * A) % M

def low16_signed_abs(x32: int) -> int:
    w = x32 & 0xFFFF
    if w & 0x8000:
        w = -((~w + 1) & 0xFFFF)
    return abs(w)

@dataclass
class PMRandom:
    """
    Park–Miller minimal-standard generator.

    Exposes randrange/randint with the same bound semantics as the stdlib
    `random.Random`, so either can be handed to the waypoint placer.
    """
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        # State must live in 1..M-1; zero would stick at zero forever.
        s = seed % M
        return cls(s or 1)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        """Return 1..n inclusive."""
        assert n > 0
        w = low16_signed_abs(self.next32())
        return (w % n) + 1

    def randrange(self, lo: int, hi: int) -> int:
        """lo <= r < hi"""
        if hi <= lo:
            raise ValueError(f"empty range for randrange({lo}, {hi})")
        return lo + self.bounded(hi - lo) - 1

    def randint(self, lo: int, hi: int) -> int:
        """lo <= r <= hi"""
        return self.randrange(lo, hi + 1)
