"""Output formatting for restsim."""

import statistics

from restsim.models import SimulationResult, Table, TableAssignment
from restsim.restaurant import Restaurant


def format_table(table: Table, assignment: TableAssignment | None) -> str:
    """Render a table as one '*' per seated person, padded to capacity."""
    occupied = assignment.party.size if assignment else 0
    return "[" + ("*" * occupied).ljust(table.capacity) + "]"


def format_step_report(restaurant: Restaurant) -> str:
    """One-line report of the restaurant's current state."""
    tables = " ".join(
        f"{i}: {format_table(table, assignment)}"
        for i, (table, assignment) in enumerate(restaurant.table_assignments(), start=1)
    )
    return (
        f"{restaurant.current_time:g} | Tables: {tables} | "
        f"Served: {restaurant.total_served}, Queue: {restaurant.waiting_patron_count}"
    )


def format_summary(result: SimulationResult) -> str:
    """Format the outcome of a simulation run for display."""
    lines: list[str] = ["=== Simulation Summary ==="]
    lines.append(f"Final time: {result.final_time:g}")
    lines.append(f"Parties generated: {result.parties_generated}")
    lines.append(f"Parties seated: {result.parties_seated}")
    lines.append(f"Total served: {result.total_served}")

    waiting_patrons = sum(party.size for party in result.still_waiting)
    lines.append(f"Still waiting: {len(result.still_waiting)} parties ({waiting_patrons} people)")

    if result.assignments:
        mean_size = statistics.mean(a.party.size for a in result.assignments)
        mean_duration = statistics.mean(a.party.dining_duration for a in result.assignments)
        lines.append(f"Mean party size: {mean_size:.2f}")
        lines.append(f"Mean dining duration: {mean_duration:.2f}")
    else:
        lines.append("No parties were seated.")

    return "\n".join(lines)


def format_assignments_csv(assignments: list[TableAssignment]) -> str:
    """Format the assignment log as CSV, in seating order."""
    lines: list[str] = ["table,party_size,starting_time,ending_time"]

    for assignment in assignments:
        lines.append(
            f"{assignment.table.id},{assignment.party.size},"
            f"{assignment.starting_time:.3f},{assignment.ending_time:.3f}"
        )

    return "\n".join(lines)
