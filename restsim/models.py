"""Data models for restsim."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Table:
    """A table at the restaurant. Occupancy is tracked by the seating manager."""

    id: int
    capacity: int

    def __post_init__(self):
        if self.capacity <= 0:
            raise ValueError(f"Table {self.id} capacity must be positive, got {self.capacity}")


@dataclass(frozen=True)
class Person:
    """A patron of the restaurant."""

    id: int
    name: str
    age: int

    def __post_init__(self):
        if self.age <= 0:
            raise ValueError(f"Person {self.id} age must be positive, got {self.age}")


@dataclass(frozen=True, eq=False)
class Party:
    """A group of people arriving and being seated together."""

    members: tuple[Person, ...]
    dining_duration: float

    def __post_init__(self):
        # Accept any sequence of members but always store a tuple
        object.__setattr__(self, "members", tuple(self.members))
        if not self.members:
            raise ValueError("A party must have at least one member")
        if self.dining_duration <= 0:
            raise ValueError(f"Dining duration must be positive, got {self.dining_duration}")

    @property
    def size(self) -> int:
        return len(self.members)


@dataclass(frozen=True)
class TableAssignment:
    """A party seated at a table for the interval [starting_time, ending_time)."""

    table: Table
    party: Party
    starting_time: float
    ending_time: float


@dataclass
class SimulationResult:
    """Result of an arrival-driven simulation run."""

    final_time: float
    total_served: int
    parties_generated: int
    assignments: list[TableAssignment] = field(default_factory=list)  # in seating order
    still_waiting: list[Party] = field(default_factory=list)

    @property
    def parties_seated(self) -> int:
        return len(self.assignments)
