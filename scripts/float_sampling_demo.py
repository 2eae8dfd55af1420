"""Demonstrate uniform float sampling over the lattice of representable values in an interval.

To run this script, use the commands:

    uv venv --clear && uv sync --extra demo
    uv run scripts/float_sampling_demo.py --low -1 --high 10 --seed 0

"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.table import Table

from float_samplers import SamplingConfig
from float_samplers.io import console, log_info


@click.command()
@click.option("--low", type=float, default=-1.0, help="Lower bound of the sampled interval")
@click.option("--high", type=float, default=10.0, help="Upper bound of the sampled interval")
@click.option("--precision", type=click.Choice(["f32", "f64"]), default="f64")
@click.option("--inclusive", is_flag=True, help="Include the upper bound in the interval")
@click.option("--seed", type=int, default=None, help="Seed for the random number generator")
@click.option("--num-samples", type=int, default=10, help="Number of samples to draw")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML sampling configuration (overrides all other options)",
)
@click.option("--verbose", is_flag=True, help="Log lattice construction details")
def main(
    low: float,
    high: float,
    precision: str,
    inclusive: bool,
    seed: int | None,
    num_samples: int,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Sample floats uniformly from an interval and display them in a table."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    if config_path is not None:
        config = SamplingConfig.from_yaml(config_path)
    else:
        config = SamplingConfig(low, high, precision, inclusive, seed, num_samples)

    sampler = config.build_sampler()
    lattice = sampler.lattice
    closing = "]" if config.inclusive else ")"
    log_info(f"Sampling {config.precision} values from [{config.low}, {config.high}{closing}")

    table = Table(title=f"Lattice: step={lattice.step!r}, count={lattice.count}")
    table.add_column("Draw", justify="right")
    table.add_column("Value", justify="left")

    for i, value in enumerate(sampler.sample_many(config.num_samples, config.make_rng())):
        table.add_row(str(i), repr(value))

    console.print(table)


if __name__ == "__main__":
    main()
