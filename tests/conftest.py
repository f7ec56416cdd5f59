import itertools

import pytest

from restsim.models import Party, Person


@pytest.fixture
def party_factory():
    """Build parties of a given size with unique patron ids."""
    ids = itertools.count(1)

    def make(size: int, duration: float = 30) -> Party:
        members = []
        for _ in range(size):
            patron_id = next(ids)
            members.append(Person(id=patron_id, name=f"Guest {patron_id}", age=30))
        return Party(members=tuple(members), dining_duration=duration)

    return make
