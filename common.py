from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Union

from prng import SplitMix64, Xoshiro256StarStar

Rng = Union[SplitMix64, Xoshiro256StarStar]


@dataclass(frozen=True)
class RngRegistryEntry:
    name: str
    factory: Callable[[int], Rng]


# Order is the order shown in usage messages.
REGISTRY: List[RngRegistryEntry] = [
    RngRegistryEntry("splitmix64", SplitMix64),
    RngRegistryEntry("xoshiro256**", Xoshiro256StarStar),
]


def registry_names() -> List[str]:
    return [entry.name for entry in REGISTRY]


def lookup(name: str) -> RngRegistryEntry:
    for entry in REGISTRY:
        if entry.name == name:
            return entry
    raise KeyError(f"unknown rng '{name}' (available: {', '.join(registry_names())})")


def make_rng(name: str, seed: int) -> Rng:
    return lookup(name).factory(seed)


def derive_worker_seeds(base_seed: int, count: int) -> List[int]:
    """
    Draw one seed per worker from a master SplitMix64.

    Deterministic in (base_seed, count); the first k seeds do not depend on
    count, so adding workers keeps the existing workers' streams.
    """
    master = SplitMix64(base_seed)
    return [master.next_u64() for _ in range(count)]
