#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import LifeSession
from lifegrid.core.config import EngineConfig
from lifegrid.core.grid import format_grid


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    session = LifeSession(EngineConfig(width=20, height=10, alive_probability=0.3, seed=7))

    print("Initial state:")
    print(format_grid(session.grid))
    print(f"Population: {session.population}")
    print()

    # Run simulation for 10 generations
    for _ in range(10):
        session.step()
        print(f"Turn {session.turn}:")
        print(format_grid(session.grid))
        print(f"Population: {session.population}")
        print()

    # Persist and restore through a state token
    token = session.save_state()
    print(f"State token: {token}")
    restored = LifeSession.from_state(token)
    print(f"Restored population: {restored.population}")

    stats = session.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
