"""
Configuration settings for skyline-bench.

Uses Pydantic Settings to load environment variables for logging, benchmark
defaults and the default attribute selection used by the CLI.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Benchmark defaults
    benchmark_rows: int = Field(10_000, alias="BENCHMARK_ROWS")
    benchmark_iterations: int = Field(5, alias="BENCHMARK_ITERATIONS")
    benchmark_warmup_runs: int = Field(3, alias="BENCHMARK_WARMUP_RUNS")
    benchmark_seed: int = Field(42, alias="BENCHMARK_SEED")
    results_dir: str = Field("results", alias="RESULTS_DIR")

    # Default attribute selection (maximize performance, minimize price)
    skyline_attr1: str = Field("performance", alias="SKYLINE_ATTR1")
    skyline_asc1: bool = Field(True, alias="SKYLINE_ASC1")
    skyline_attr2: str = Field("price", alias="SKYLINE_ATTR2")
    skyline_asc2: bool = Field(False, alias="SKYLINE_ASC2")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
