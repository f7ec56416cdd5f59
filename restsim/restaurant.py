"""Step-driven restaurant simulation for restsim."""

from typing import Literal

from restsim.models import Party, Table, TableAssignment
from restsim.seating import SeatingManager

# scan_all: try every waiting party each step, keeping the unseated ones in order.
# strict_fifo: stop at the first party that cannot be seated.
SeatingPolicy = Literal["scan_all", "strict_fifo"]
SEATING_POLICIES: tuple[SeatingPolicy, ...] = ("scan_all", "strict_fifo")


class Restaurant:
    """
    The restaurant's clock, waiting queue and seating.

    Each call to simulate_step advances time, frees finished tables and then
    seats waiting parties in arrival order.
    """

    def __init__(self, tables: list[Table], seating_policy: SeatingPolicy = "scan_all"):
        if seating_policy not in SEATING_POLICIES:
            raise ValueError(f"Unknown seating policy: {seating_policy}")
        self.seating = SeatingManager(tables)
        self.seating_policy = seating_policy
        self._waiting_queue: list[Party] = []
        self._current_time: float = 0
        self._total_served = 0

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def total_served(self) -> int:
        """Number of people seated so far; not reduced when they leave."""
        return self._total_served

    @property
    def waiting_queue(self) -> tuple[Party, ...]:
        return tuple(self._waiting_queue)

    @property
    def waiting_party_count(self) -> int:
        return len(self._waiting_queue)

    @property
    def waiting_patron_count(self) -> int:
        return sum(party.size for party in self._waiting_queue)

    @property
    def available_table_count(self) -> int:
        return self.seating.has_available_tables()

    def table_assignments(self) -> list[tuple[Table, TableAssignment | None]]:
        return self.seating.table_assignments()

    def add_to_waiting_queue(self, party: Party) -> None:
        self._waiting_queue.append(party)

    def simulate_step(self, time_step: float) -> list[TableAssignment]:
        """
        Advance the clock by time_step and seat whoever fits.

        Tables whose parties have finished by the new time are freed first,
        so they can be reused in the same step. Returns the assignments made.
        """
        if time_step < 0:
            raise ValueError(f"Time step must be non-negative, got {time_step}")

        self._current_time += time_step
        self.seating.clear_finished(self._current_time)

        seated: list[TableAssignment] = []
        not_seated: list[Party] = []
        for index, party in enumerate(self._waiting_queue):
            assignment = self.seating.assign_if_possible(party, self._current_time)
            if assignment is not None:
                self._total_served += party.size
                seated.append(assignment)
                continue

            if self.seating_policy == "strict_fifo":
                not_seated.extend(self._waiting_queue[index:])
                break
            not_seated.append(party)

        self._waiting_queue = not_seated
        return seated

    def run_simulation(self, duration: float, time_step: float) -> None:
        """Step until the clock reaches duration."""
        if time_step <= 0:
            raise ValueError(f"Time step must be positive, got {time_step}")
        while self._current_time < duration:
            self.simulate_step(time_step)
