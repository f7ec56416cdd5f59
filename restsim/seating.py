"""Table assignment and eviction for restsim."""

from restsim.models import Party, Table, TableAssignment


class SeatingManager:
    """
    Owns the restaurant's tables and the parties currently seated at them.

    The table -> assignment relation lives here only; tables, parties and
    people carry no reference to where they are seated.
    """

    def __init__(self, tables: list[Table]):
        self._tables: list[Table] = list(tables)
        self._assignments: dict[int, TableAssignment | None] = {}
        for table in self._tables:
            if table.id in self._assignments:
                raise ValueError(f"Duplicate table id: {table.id}")
            self._assignments[table.id] = None

        self._seated: set[Party] = set()  # parties hash by identity
        self._n_available = len(self._tables)

    @property
    def tables(self) -> list[Table]:
        return list(self._tables)

    def table_assignments(self) -> list[tuple[Table, TableAssignment | None]]:
        """Return (table, live assignment or None) pairs in table order."""
        return [(table, self._assignments[table.id]) for table in self._tables]

    def has_available_tables(self) -> int:
        """Return the number of tables with no live assignment."""
        return self._n_available

    def is_seated(self, party: Party) -> bool:
        return party in self._seated

    def assign_if_possible(self, party: Party, start_time: float) -> TableAssignment | None:
        """
        Seat party at the first free table large enough for it (first-fit).

        Returns the new assignment, or None if no table fits right now.
        """
        if self.is_seated(party):
            raise ValueError("Party is already seated")

        for table in self._tables:
            if self._assignments[table.id] is None and table.capacity >= party.size:
                assignment = TableAssignment(
                    table=table,
                    party=party,
                    starting_time=start_time,
                    ending_time=start_time + party.dining_duration,
                )
                self._assignments[table.id] = assignment
                self._seated.add(party)
                self._n_available -= 1
                return assignment

        return None

    def clear_finished(self, current_time: float) -> list[TableAssignment]:
        """Clear every assignment that has ended by current_time and return them."""
        cleared: list[TableAssignment] = []
        for table in self._tables:
            assignment = self._assignments[table.id]
            if assignment is not None and assignment.ending_time <= current_time:
                self._assignments[table.id] = None
                self._seated.discard(assignment.party)
                self._n_available += 1
                cleared.append(assignment)
        return cleared
