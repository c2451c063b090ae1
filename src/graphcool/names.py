"""Random human-readable project names, e.g. "Bright Otter"."""

from __future__ import annotations

import random

ADJECTIVES: tuple[str, ...] = (
    "Ancient", "Bold", "Brave", "Bright", "Calm", "Clever", "Cosmic", "Crimson",
    "Curious", "Dapper", "Eager", "Electric", "Fancy", "Fearless", "Gentle",
    "Golden", "Happy", "Hidden", "Humble", "Jolly", "Lively", "Lucky", "Mighty",
    "Misty", "Noble", "Polite", "Quiet", "Rapid", "Silent", "Silver", "Swift",
    "Witty",
)

ANIMALS: tuple[str, ...] = (
    "Badger", "Beaver", "Bison", "Condor", "Coyote", "Falcon", "Ferret", "Fox",
    "Gecko", "Heron", "Ibis", "Jaguar", "Koala", "Lemur", "Lynx", "Marten",
    "Moose", "Narwhal", "Ocelot", "Otter", "Panda", "Puffin", "Quokka", "Raven",
    "Salmon", "Seal", "Tapir", "Toucan", "Walrus", "Wombat", "Yak", "Zebra",
)


def generate_name(rng: random.Random | None = None) -> str:
    """Return a capitalised two-word project name, e.g. "Bright Otter"."""
    rng = rng or random.Random()
    return f"{rng.choice(ADJECTIVES)} {rng.choice(ANIMALS)}"
