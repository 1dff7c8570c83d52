import random

from dispatch import DispatchEngine, ElevatorStatus


def _riding(engine):
    return sum(e["passenger_count"] for e in engine.snapshot()["elevators"])


def _sweep_to_top(engine, top):
    engine.update(0, top)
    for _ in range(top):
        engine.step()
    assert engine.status() == [ElevatorStatus(0, top, 0)]


def test_single_rider_ground_to_top():
    engine = DispatchEngine(5, 1)
    engine.pickup(0, 4)

    for expected in (1, 2, 3, 4):
        engine.step()
        assert engine.status()[0].current_floor == expected
        if expected < 4:
            assert _riding(engine) == 1
            assert engine.snapshot()["floors"][0] == 0

    snapshot = engine.snapshot()
    assert snapshot["delivered"] == 1
    assert _riding(engine) == 0
    # Arrived on the way up, so it is sent back to the bottom.
    assert engine.status() == [ElevatorStatus(0, 4, 0)]


def test_resting_elevator_stays_put():
    engine = DispatchEngine(10, 2)
    engine.update(0, 9)
    engine.update(1, 0)

    engine.step()

    assert engine.status() == [ElevatorStatus(0, 1, 9), ElevatorStatus(1, 0, 0)]


def test_fresh_engine_without_requests_is_idle():
    engine = DispatchEngine(4, 2)

    for _ in range(3):
        engine.step()

    assert engine.status() == [ElevatorStatus(0, 0, 0), ElevatorStatus(1, 0, 0)]


def test_empty_elevator_sweeps_between_ends():
    engine = DispatchEngine(5, 1)
    engine.update(0, 4)

    trace = []
    for _ in range(16):
        engine.step()
        status = engine.status()[0]
        trace.append((status.current_floor, status.destination_floor))

    assert [floor for floor, _ in trace] == [1, 2, 3, 4, 3, 2, 1, 0, 1, 2, 3, 4, 3, 2, 1, 0]
    assert trace[3] == (4, 0)
    assert trace[7] == (0, 4)
    assert trace[11] == (4, 0)


def test_interior_destination_turns_into_sweep():
    engine = DispatchEngine(10, 1)
    engine.update(0, 5)

    for _ in range(5):
        engine.step()
    assert engine.status() == [ElevatorStatus(0, 5, 0)]

    engine.step()
    assert engine.status() == [ElevatorStatus(0, 4, 0)]


def test_descending_elevator_boards_downward_rider():
    engine = DispatchEngine(10, 1)
    _sweep_to_top(engine, 9)
    engine.pickup(6, 2)

    for _ in range(3):
        engine.step()
    snapshot = engine.snapshot()
    assert engine.status() == [ElevatorStatus(0, 6, 0)]
    assert snapshot["floors"][6] == 0
    assert snapshot["elevators"][0]["passenger_floors"] == [2]

    for _ in range(4):
        engine.step()
    assert engine.status()[0].current_floor == 2
    assert engine.snapshot()["delivered"] == 1
    assert _riding(engine) == 0


def test_rider_bound_for_destination_floor_boards():
    engine = DispatchEngine(6, 1)
    _sweep_to_top(engine, 5)
    engine.pickup(4, 0)

    engine.step()

    assert engine.snapshot()["elevators"][0]["passenger_floors"] == [0]


def test_descending_elevator_leaves_upward_rider_waiting():
    engine = DispatchEngine(10, 1)
    _sweep_to_top(engine, 9)
    engine.pickup(6, 8)

    # A full round trip passes floor 6 three times.
    for _ in range(21):
        engine.step()

    snapshot = engine.snapshot()
    assert snapshot["floors"][6] == 1
    assert _riding(engine) == 0


def test_resting_elevator_takes_everyone_at_its_floor():
    engine = DispatchEngine(10, 1)
    engine.pickup(0, 3)
    engine.pickup(0, 7)

    engine.step()
    assert engine.status() == [ElevatorStatus(0, 1, 3)]
    assert engine.snapshot()["elevators"][0]["passenger_floors"] == [3, 7]

    engine.step()
    engine.step()
    assert engine.status() == [ElevatorStatus(0, 3, 0)]
    assert engine.snapshot()["elevators"][0]["passenger_floors"] == [7]

    for _ in range(3):
        engine.step()
    assert engine.status() == [ElevatorStatus(0, 0, 9)]

    for _ in range(7):
        engine.step()
    assert engine.status()[0].current_floor == 7
    assert engine.snapshot()["delivered"] == 2


def test_lowest_id_resting_elevator_wins():
    engine = DispatchEngine(5, 2)
    engine.pickup(0, 2)

    engine.step()

    assert engine.status() == [ElevatorStatus(0, 1, 2), ElevatorStatus(1, 0, 0)]


def test_single_floor_building_never_moves():
    engine = DispatchEngine(1, 2)

    for _ in range(5):
        engine.step()

    assert engine.status() == [ElevatorStatus(0, 0, 0), ElevatorStatus(1, 0, 0)]


def test_requests_are_conserved():
    rng = random.Random(3)
    floor_count = 8
    engine = DispatchEngine(floor_count, 3)
    engine.update(1, floor_count - 1)
    created = 0

    for _ in range(200):
        for _ in range(rng.randint(0, 2)):
            origin, destination = rng.sample(range(floor_count), 2)
            engine.pickup(origin, destination)
            created += 1
        engine.step()

        snapshot = engine.snapshot()
        waiting = sum(snapshot["floors"])
        assert waiting + _riding(engine) + snapshot["delivered"] == created

        held = [r for floor in engine.floors for r in floor.queue]
        held += [r for elevator in engine.elevators for r in elevator.passengers]
        assert len({id(r) for r in held}) == len(held)

    assert engine.snapshot()["delivered"] > 0


def test_resting_elevator_sets_off_for_rider_on_another_floor():
    engine = DispatchEngine(10, 1)
    engine.pickup(3, 0)

    engine.step()
    assert engine.status() == [ElevatorStatus(0, 1, 9)]

    # Up to the top, then down past floor 3 to the ground.
    for _ in range(17):
        engine.step()

    snapshot = engine.snapshot()
    assert snapshot["delivered"] == 1
    assert snapshot["floors"][3] == 0
    assert engine.status() == [ElevatorStatus(0, 0, 9)]


def test_resting_elevator_only_wakes_for_riders_in_its_range():
    engine = DispatchEngine(10, 2, floor_ranges=[(0, 4), (5, 9)])
    engine.pickup(7, 6)

    engine.step()
    assert engine.status() == [ElevatorStatus(0, 0, 0), ElevatorStatus(1, 6, 9)]

    for _ in range(6):
        engine.step()
    assert engine.snapshot()["delivered"] == 1
    assert engine.status()[0] == ElevatorStatus(0, 0, 0)


def test_resting_elevator_leaves_unreachable_rider_waiting():
    engine = DispatchEngine(10, 1, floor_ranges=[(0, 4)])
    engine.pickup(0, 8)

    for _ in range(10):
        engine.step()

    assert engine.snapshot()["waiting"][0] == [8]
    assert _riding(engine) == 0
