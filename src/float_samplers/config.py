"""Define a dataclass describing a uniform float sampling run, loadable from YAML."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

import numpy as np

from float_samplers.io.yaml_utils import export_yaml_data, load_yaml_data
from float_samplers.math.float_bits import FloatPrecision, precision_from_name
from float_samplers.math.sampling import UniformFloatSampler

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class SamplingConfig:
    """Bounds, precision, and random seed used to draw uniform float samples."""

    low: float
    high: float
    precision: str = "f64"
    """Name of the floating-point precision ("f32" or "f64")."""

    inclusive: bool = False
    """Whether `high` is included in the sampled interval."""

    seed: int | None = None
    """Seed for the random number generator (if None, samples are not reproducible)."""

    num_samples: int = 10

    def __post_init__(self) -> None:
        """Verify that the precision name is known and the sample count is non-negative."""
        precision_from_name(self.precision)
        if self.num_samples < 0:
            raise ValueError(f"Cannot draw a negative number of samples: {self.num_samples}.")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> SamplingConfig:
        """Load a sampling configuration from the given YAML file."""
        data = load_yaml_data(yaml_path, required_keys={"low", "high"})
        return SamplingConfig(
            low=float(data["low"]),
            high=float(data["high"]),
            precision=str(data.get("precision", "f64")),
            inclusive=bool(data.get("inclusive", False)),
            seed=data.get("seed"),
            num_samples=int(data.get("num_samples", 10)),
        )

    def to_yaml(self, yaml_path: Path) -> None:
        """Export the sampling configuration to the given YAML file."""
        export_yaml_data(asdict(self), yaml_path)

    @property
    def float_precision(self) -> FloatPrecision:
        """Retrieve the floating-point precision named by the configuration."""
        return precision_from_name(self.precision)

    def build_sampler(self) -> UniformFloatSampler:
        """Construct the uniform float sampler described by the configuration."""
        if self.inclusive:
            return UniformFloatSampler.new_inclusive(self.low, self.high, self.float_precision)
        return UniformFloatSampler.new(self.low, self.high, self.float_precision)

    def make_rng(self) -> np.random.Generator:
        """Create the random number generator described by the configuration."""
        return np.random.default_rng(self.seed)
