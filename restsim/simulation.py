"""Arrival-driven simulation runs for restsim."""

from collections.abc import Callable

from restsim.generator import PartyGenerator
from restsim.models import SimulationResult, TableAssignment
from restsim.restaurant import Restaurant


def run_simulation_with_arrivals(
    restaurant: Restaurant,
    generator: PartyGenerator,
    duration: float,
    time_step: float,
    initial_parties: int = 0,
    on_step: Callable[[Restaurant], None] | None = None,
) -> SimulationResult:
    """
    Run the restaurant until duration with random arrivals.

    Makes initial_parties arrival trials before the first step, then one
    arrival trial per step. on_step is called after every step.
    """
    if time_step <= 0:
        raise ValueError(f"Time step must be positive, got {time_step}")
    if initial_parties < 0:
        raise ValueError(f"Initial parties must be non-negative, got {initial_parties}")

    parties_generated = 0
    assignments: list[TableAssignment] = []

    # Seed the queue before the doors open
    for _ in range(initial_parties):
        party = generator.generate_party()
        if party is not None:
            restaurant.add_to_waiting_queue(party)
            parties_generated += 1

    while restaurant.current_time < duration:
        party = generator.generate_party()
        if party is not None:
            restaurant.add_to_waiting_queue(party)
            parties_generated += 1

        assignments.extend(restaurant.simulate_step(time_step))

        if on_step is not None:
            on_step(restaurant)

    return SimulationResult(
        final_time=restaurant.current_time,
        total_served=restaurant.total_served,
        parties_generated=parties_generated,
        assignments=assignments,
        still_waiting=list(restaurant.waiting_queue),
    )
