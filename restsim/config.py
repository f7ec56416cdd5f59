"""YAML configuration for restsim."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from restsim.generator import PartyGeneratorConfig
from restsim.models import Table
from restsim.restaurant import SEATING_POLICIES, SeatingPolicy

DEFAULT_SEED = "restaurant-sim"
DEFAULT_DURATION = 240  # 4 hours until closing
DEFAULT_TIME_STEP = 5
DEFAULT_INITIAL_PARTIES = 5
DEFAULT_TABLE_CAPACITIES = [2, 2, 4, 4, 6]


def default_tables() -> list[Table]:
    return [Table(id=i, capacity=c) for i, c in enumerate(DEFAULT_TABLE_CAPACITIES, start=1)]


@dataclass
class SimulationConfig:
    """Everything needed to set up and run one simulation."""

    seed: int | str = DEFAULT_SEED
    duration: float = DEFAULT_DURATION
    time_step: float = DEFAULT_TIME_STEP
    initial_parties: int = DEFAULT_INITIAL_PARTIES
    seating_policy: SeatingPolicy = "scan_all"
    tables: list[Table] = field(default_factory=default_tables)
    generator: PartyGeneratorConfig = field(default_factory=PartyGeneratorConfig)


def parse_config(data: dict | None) -> SimulationConfig:
    """Build a SimulationConfig from already-parsed YAML data."""
    if not data:
        return SimulationConfig()
    if not isinstance(data, dict):
        raise ValueError("Configuration must be a YAML mapping")

    config = SimulationConfig(
        seed=data.get("seed", DEFAULT_SEED),
        duration=data.get("duration", DEFAULT_DURATION),
        time_step=data.get("time_step", DEFAULT_TIME_STEP),
        initial_parties=data.get("initial_parties", DEFAULT_INITIAL_PARTIES),
        seating_policy=data.get("seating_policy", "scan_all"),
    )

    # bool is an int subclass but never a meaningful seed or count
    if isinstance(config.seed, bool) or not isinstance(config.seed, (int, str)):
        raise ValueError(f"Seed must be an integer or a string, got {config.seed!r}")
    for name in ("duration", "time_step"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a number, got {value!r}")
    if isinstance(config.initial_parties, bool) or not isinstance(config.initial_parties, int):
        raise ValueError(f"initial_parties must be an integer, got {config.initial_parties!r}")

    if config.seating_policy not in SEATING_POLICIES:
        raise ValueError(
            f"Unknown seating policy {config.seating_policy!r}, "
            f"expected one of: {', '.join(SEATING_POLICIES)}"
        )

    if "tables" in data:
        entries = data["tables"] or []
        if not isinstance(entries, list):
            raise ValueError("tables must be a list of {id, capacity} mappings")
        tables: list[Table] = []
        for index, entry in enumerate(entries, start=1):
            if not isinstance(entry, dict):
                raise ValueError(f"Table entry {index} must be a mapping with a capacity, got {entry!r}")
            # Table ids default to their position in the list
            tables.append(Table(id=entry.get("id", index), capacity=entry["capacity"]))
        if not tables:
            raise ValueError("At least one table is required")
        config.tables = tables

    if data.get("generator"):
        config.generator = PartyGeneratorConfig(**data["generator"])

    return config


def load_config(yaml_path: Path) -> SimulationConfig:
    """Parse a simulation configuration YAML file."""
    with yaml_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return parse_config(data)


def create_config_template(output_path: Path):
    """Write a configuration file populated with the defaults."""
    defaults = SimulationConfig()
    template = {
        "seed": defaults.seed,
        "duration": defaults.duration,
        "time_step": defaults.time_step,
        "initial_parties": defaults.initial_parties,
        "seating_policy": defaults.seating_policy,
        "tables": [{"id": t.id, "capacity": t.capacity} for t in defaults.tables],
        "generator": {
            "arrival_rate": defaults.generator.arrival_rate,
            "min_party_size": defaults.generator.min_party_size,
            "max_party_size": defaults.generator.max_party_size,
            "min_dining_time": defaults.generator.min_dining_time,
            "max_dining_time": defaults.generator.max_dining_time,
        },
    }

    header = f"""\
# Simulation configuration for restsim
#
# Times (duration, time_step, dining times) share one unit, e.g. minutes.
#
# Seating policies:
#   - scan_all: every waiting party is tried each step; unseated parties keep their order
#   - strict_fifo: seating stops at the first party that cannot be seated
#
# Generator:
#   arrival_rate is the chance of one party arriving per step, in [0, 1].
#   Party sizes are uniform in [min_party_size, max_party_size].
#   Dining times are uniform in [min_dining_time, max_dining_time).
#
# Valid policies: {", ".join(SEATING_POLICIES)}

"""

    with output_path.open("w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(template, f, default_flow_style=False, sort_keys=False)
