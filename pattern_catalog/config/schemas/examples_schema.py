"""Inputs for the catalogued examples."""
from typing import Optional

from pydantic import BaseModel, Field


class ExamplesConfig(BaseModel):
    """Literal inputs used by the example bodies."""

    fibonacci_count: int = Field(10, ge=0, description="Fibonacci values to print")
    random_count: int = Field(10, ge=0, description="RandomGenerator starting counter")
    random_upper: int = Field(200, gt=0, description="Exclusive upper bound of random values")
    random_seed: Optional[int] = Field(None, description="Seed for reproducible random output")
