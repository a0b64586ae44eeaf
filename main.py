"""
main.py — Headless chase run

1. Load tuning constants
2. Build the road from an ASCII map
3. Create the encounter (player bike + motorcycles)
4. Drive the bike with a scripted intent for a few seconds
5. Print the AI feed and the outcome
"""

from core import tuning
from core.grid import TileGrid
from components import BikeConfig, EncounterConfig, MotorcycleConfig
from logic.ai.wander import DiskSampler
from logic.encounter import Encounter


ROAD = [
    "##########################",
    "#........................#",
    "#........................#",
    "#....######....######....#",
    "#....#    #....#    #....#",
    "#....######....######....#",
    "#........................#",
    "#........................#",
    "##########################",
]

FRAME_DT = 1 / 60
RUN_SECONDS = 12.0


def scripted_intent(t: float) -> tuple[float, float]:
    """Loop around the left block, then bolt right."""
    if t < 2.0:
        return (1.0, 0.0)
    if t < 4.0:
        return (0.0, 1.0)
    if t < 7.0:
        return (-1.0, 0.0)
    return (1.0, -0.2)


def main():
    tuning.load()

    grid = TileGrid.from_ascii(ROAD)
    enc = Encounter(
        grid, player_spawn=(2.5, 1.5),
        config=EncounterConfig.from_tuning(),
        bike_config=BikeConfig.from_tuning(),
    )
    moto_cfg = MotorcycleConfig.from_tuning()
    enc.add_motorcycle((12.5, 6.5), moto_cfg, sampler=DiskSampler(seed=1))
    enc.add_motorcycle((22.5, 1.5), moto_cfg, sampler=DiskSampler(seed=2))
    print(f"[MAIN] {grid!r}")
    print(f"[MAIN] {enc!r}")

    frames = int(RUN_SECONDS / FRAME_DT)
    for _ in range(frames):
        enc.update(FRAME_DT, scripted_intent(enc.clock.time))
        if enc.defeated:
            break

    for entry in enc.log.recent(40):
        print(f"  {entry}")

    for moto in enc.motorcycles:
        print(f"[MAIN] {moto!r}")
    outcome = "defeated" if enc.defeated else f"escaped with {enc.health.current:g} HP"
    print(f"[MAIN] player {outcome} after {enc.clock.time:.2f}s  "
          f"events={enc.bus.stats()}")


if __name__ == "__main__":
    main()
