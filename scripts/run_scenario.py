"""CLI for running offline LiftLogic dispatch scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError

from dispatch import DispatchError
from simulation import ScenarioConfig, Simulation, build_simulation

logger = logging.getLogger("run_scenario")


def load_config(path: Path) -> ScenarioConfig:
    return ScenarioConfig.model_validate_json(path.read_text())


def run_simulation(simulation: Simulation, config: ScenarioConfig) -> List[Dict]:
    snapshots: List[Dict] = []
    simulation.on_event("status", snapshots.append)
    simulation.run(config.duration)
    return snapshots


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write status snapshots as JSON",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config)
        simulation = build_simulation(config)
        snapshots = run_simulation(simulation, config)
    except (ValidationError, DispatchError) as exc:
        logger.error("scenario %s failed: %s", args.config, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    final_state = simulation.state()
    results = {
        "scenario": config.name or args.config.stem,
        "description": config.description,
        "duration": config.duration,
        "arrivals": simulation.arrivals,
        "final_state": final_state,
        "states_over_time": snapshots,
    }

    save_results(args.output, results)

    engine_state = final_state["engine"]
    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Duration: {results['duration']} ticks")
    for entry in final_state["status"]:
        print(f"  elevator {entry['elevator_id']}: floor {entry['current_floor']} -> {entry['destination_floor']}")
    print(f"Arrivals: {simulation.arrivals}")
    print(f"Waiting: {sum(engine_state['floors'])}")
    print(f"Riding: {sum(e['passenger_count'] for e in engine_state['elevators'])}")
    print(f"Delivered: {engine_state['delivered']}")
    if args.output:
        print(f"Saved states to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
