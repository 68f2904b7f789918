"""Generate synthetic yearly indicator series as a wide CSV for demos."""

import argparse
import random
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from econstats.config import DATA_PATH  # noqa: E402


# Rough baseline level and yearly drift per entity (e.g. real GDP growth, %)
ENTITY_SEED: Dict[str, Dict[str, float]] = {
    "USA": {"level": 2.3, "drift": 0.00, "volatility": 1.2},
    "BRA": {"level": 2.0, "drift": -0.02, "volatility": 2.5},
    "CHN": {"level": 9.5, "drift": -0.15, "volatility": 1.0},
    "DEU": {"level": 1.6, "drift": -0.01, "volatility": 1.5},
    "IND": {"level": 6.5, "drift": 0.01, "volatility": 1.8},
    "JPN": {"level": 1.0, "drift": -0.01, "volatility": 1.4},
    "ZAF": {"level": 2.5, "drift": -0.03, "volatility": 2.0},
    "ARG": {"level": 2.8, "drift": -0.02, "volatility": 4.5},
}

# Tuning knobs for realism
SHOCK_PROB = 0.05  # chance a year carries a large shock (crisis/rebound)
SHOCK_SIZE = 6.0  # magnitude of a shock, in units of the indicator
GAP_PROB = 0.03  # chance a year is missing from the provider


def generate_series(
    entity: str,
    years: Sequence[int],
    rng: random.Random,
    gap_prob: float = GAP_PROB,
) -> List[Optional[float]]:
    """One entity's yearly values; missing years are None."""
    params = ENTITY_SEED.get(entity, {"level": 2.0, "drift": 0.0, "volatility": 1.5})
    values: List[Optional[float]] = []
    previous_noise = 0.0
    for offset in range(len(years)):
        if rng.random() < gap_prob:
            values.append(None)
            continue
        # AR(1) noise gives the series some year-to-year persistence
        noise = 0.5 * previous_noise + rng.gauss(0, params["volatility"])
        previous_noise = noise
        shock = 0.0
        if rng.random() < SHOCK_PROB:
            shock = rng.choice([-1, 1]) * SHOCK_SIZE
        values.append(round(params["level"] + params["drift"] * offset + noise + shock, 3))
    return values


def build_frame(
    entities: Sequence[str],
    start_year: int,
    end_year: int,
    seed: int = 42,
    gap_prob: float = GAP_PROB,
) -> pd.DataFrame:
    """Wide frame indexed by period (year as text), one column per entity."""
    if end_year < start_year:
        raise ValueError(f"end year {end_year} is before start year {start_year}")
    rng = random.Random(seed)
    years = list(range(start_year, end_year + 1))
    frame = pd.DataFrame(
        {entity: generate_series(entity, years, rng, gap_prob=gap_prob) for entity in entities},
        index=pd.Index([str(year) for year in years], name="period"),
    )
    return frame


def write_csv(frame: pd.DataFrame, output: Path) -> Path:
    output.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(output)
    return output


def main() -> None:
    args = parse_args()
    entities = args.entities or list(ENTITY_SEED)
    print(f"Generating {args.start_year}-{args.end_year} series for {len(entities)} entities...")
    frame = build_frame(entities, args.start_year, args.end_year, seed=args.random_seed, gap_prob=args.gap_prob)
    output = write_csv(frame, Path(args.data_path) / args.output)
    print(f"Wrote {frame.shape[0]} periods x {frame.shape[1]} entities to {output}")


def parse_args() -> argparse.Namespace:
    """CLI options so you can shape the demo data set."""
    parser = argparse.ArgumentParser(description="Generate synthetic indicator series into a wide CSV.")
    parser.add_argument("--entities", nargs="*", help="Entity codes (default: all seeded codes)")
    parser.add_argument("--start-year", type=int, default=1980, help="First year (default: 1980)")
    parser.add_argument("--end-year", type=int, default=2024, help="Last year (default: 2024)")
    parser.add_argument("--gap-prob", type=float, default=GAP_PROB, help="Chance a year is missing")
    parser.add_argument("--random-seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument("--data-path", default=DATA_PATH, help="Output directory (default: DATA_PATH)")
    parser.add_argument("--output", default="indicator_series.csv", help="Output file name")
    return parser.parse_args()


if __name__ == "__main__":
    main()
