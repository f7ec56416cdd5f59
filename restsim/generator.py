"""Random party arrivals for restsim."""

from dataclasses import dataclass

from restsim.models import Party, Person
from restsim.randomizer import Randomizer

MIN_PATRON_AGE = 20
PATRON_AGE_SPAN = 40  # ages fall in [20, 60)


@dataclass(frozen=True)
class RandomDurationDist:
    """Uniform distribution over durations in [lower_bound, upper_bound)."""

    lower_bound: float
    upper_bound: float

    def __post_init__(self):
        if self.lower_bound > self.upper_bound:
            raise ValueError(
                f"Lower bound {self.lower_bound} exceeds upper bound {self.upper_bound}"
            )

    def interpolate(self, randomizer: Randomizer) -> float:
        return self.lower_bound + randomizer.float() * (self.upper_bound - self.lower_bound)


@dataclass(frozen=True)
class PartyGeneratorConfig:
    """Distribution parameters for generated parties."""

    arrival_rate: float = 0.4  # probability of an arrival per step
    min_party_size: int = 1
    max_party_size: int = 6
    min_dining_time: float = 30
    max_dining_time: float = 90

    def __post_init__(self):
        if not 0 <= self.arrival_rate <= 1:
            raise ValueError(f"Arrival rate must be in [0, 1], got {self.arrival_rate}")
        if self.min_party_size < 1:
            raise ValueError(f"Minimum party size must be at least 1, got {self.min_party_size}")
        if self.min_party_size > self.max_party_size:
            raise ValueError(
                f"Minimum party size {self.min_party_size} exceeds maximum {self.max_party_size}"
            )
        if self.min_dining_time <= 0:
            raise ValueError(f"Minimum dining time must be positive, got {self.min_dining_time}")
        if self.min_dining_time > self.max_dining_time:
            raise ValueError(
                f"Minimum dining time {self.min_dining_time} exceeds maximum {self.max_dining_time}"
            )


class PartyGenerator:
    """Generates parties of new patrons using an explicitly passed Randomizer."""

    def __init__(self, randomizer: Randomizer, config: PartyGeneratorConfig | None = None):
        self.randomizer = randomizer
        self.config = config or PartyGeneratorConfig()
        self.dining_dist = RandomDurationDist(
            self.config.min_dining_time, self.config.max_dining_time
        )
        self._next_patron_id = 1

    @property
    def next_patron_id(self) -> int:
        return self._next_patron_id

    def generate_party(self) -> Party | None:
        """Run one arrival trial. Returns the new party, or None if nobody arrived."""
        if self.randomizer.float() < self.config.arrival_rate:
            return self.make_party()
        return None

    def make_party(self) -> Party:
        """Synthesize a party with fresh patron ids."""
        span = self.config.max_party_size - self.config.min_party_size + 1
        party_size = self.config.min_party_size + self.randomizer.range(span)

        members: list[Person] = []
        for _ in range(party_size):
            patron_id = self._next_patron_id
            self._next_patron_id += 1
            members.append(
                Person(
                    id=patron_id,
                    name=f"Guest {patron_id}",
                    age=MIN_PATRON_AGE + self.randomizer.range(PATRON_AGE_SPAN),
                )
            )

        return Party(members=tuple(members), dining_duration=self.dining_dist.interpolate(self.randomizer))
