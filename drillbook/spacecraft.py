"""A simple constant-acceleration trajectory model for an Earth-to-Mars trip."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class Spacecraft:
    """Spacecraft under constant thrust, moving from rest toward Mars.

    Velocities are in km/s, mass in kg, thrust in newtons, distances in km.
    """

    initial_velocity: float
    fuel_mass: float
    thrust: float
    distance_to_mars: float
    gravitational_acceleration: float = field(default=9.81, init=False)

    def __post_init__(self) -> None:
        if self.fuel_mass <= 0 or self.thrust <= 0 or self.distance_to_mars <= 0:
            raise ValueError(
                "Invalid input: Fuel mass, thrust, and distance to Mars "
                "must be positive values."
            )

    def acceleration(self) -> float:
        """Return thrust divided by mass."""
        return self.thrust / self.fuel_mass

    def calculate_position(self, time: float) -> float:
        """Return the distance covered after `time` seconds: ut + at^2/2."""
        return self.initial_velocity * time + 0.5 * self.acceleration() * time**2

    def calculate_velocity(self, time: float) -> float:
        """Return the velocity after `time` seconds: u + at."""
        return self.initial_velocity + self.acceleration() * time

    def run_simulation(self, time_step: float) -> list[tuple[float, float]]:
        """Step through time until Mars is reached.

        Returns (position, velocity) pairs, the last one at or past Mars.
        """
        if time_step <= 0:
            raise ValueError("time_step must be positive")
        trajectory: list[tuple[float, float]] = []
        time = 0.0
        position = 0.0
        while position < self.distance_to_mars:
            velocity = self.calculate_velocity(time)
            position = self.calculate_position(time)
            trajectory.append((position, velocity))
            time += time_step
        return trajectory


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation and print each step."""
    parser = argparse.ArgumentParser(description="Simulate a trip to Mars.")
    parser.add_argument("--initial-velocity", type=float, default=0.0)
    parser.add_argument("--fuel-mass", type=float, default=2000000.0)
    parser.add_argument("--thrust", type=float, default=35000.0)
    parser.add_argument("--distance", type=float, default=225000000.0)
    parser.add_argument("--time-step", type=float, default=1000.0)
    args = parser.parse_args(argv)

    try:
        craft = Spacecraft(
            args.initial_velocity, args.fuel_mass, args.thrust, args.distance
        )
        trajectory = craft.run_simulation(args.time_step)
    except ValueError as exc:
        print(f"Simulation failed: {exc}", file=sys.stderr)
        return 1

    for position, velocity in trajectory:
        print(f"Position: {position:g} km, Velocity: {velocity:g} km/s")
    return 0