"""Random number API layer.

This module exposes a FastAPI app that serves unranged draws, range-mapped
draws and the full demo transcript. Every request owns its generator, seeded
either from the ``seed`` query parameter or from the current time.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from main import run_demo
from seeded_random import RAND_MAX, InvalidRangeError, SeededRandom, check_range

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Random Range API", version="1.0.0")


@dataclass
class AppConfig:
    max_count: int = int(os.getenv("RAND_MAX_COUNT", "1000"))


_config = AppConfig()


def get_config() -> AppConfig:
    return _config


class RandResponse(BaseModel):
    seed: int
    rand_max: int
    numbers: list[int]


class RandRangeResponse(BaseModel):
    seed: int
    low: int
    high: int
    numbers: list[int]


class DemoResponse(BaseModel):
    seed: int
    lines: list[str]


@app.get("/rand", response_model=RandResponse)
def handle_rand(
    count: int = Query(10, ge=0),
    seed: int | None = None,
    config: AppConfig = Depends(get_config),
):
    _check_count(count, config)
    rng = _make_rng(seed)
    numbers = [rng.rand() for _ in range(count)]
    logger.info("Served %d unranged draws for seed %d", count, rng.seed)
    return RandResponse(seed=rng.seed, rand_max=RAND_MAX, numbers=numbers)


@app.get("/rand-range", response_model=RandRangeResponse)
def handle_rand_range(
    low: int,
    high: int,
    count: int = Query(10, ge=0),
    seed: int | None = None,
    config: AppConfig = Depends(get_config),
):
    _check_count(count, config)
    try:
        check_range(low, high)
    except InvalidRangeError as exc:
        logger.warning("Rejected inverted range [%d, %d]", low, high)
        raise HTTPException(status_code=422, detail="high must not be less than low") from exc

    rng = _make_rng(seed)
    numbers = [rng.rand_range(low, high) for _ in range(count)]
    logger.info("Served %d draws in [%d, %d] for seed %d", count, low, high, rng.seed)
    return RandRangeResponse(seed=rng.seed, low=low, high=high, numbers=numbers)


@app.get("/demo", response_model=DemoResponse)
def handle_demo(seed: int | None = None):
    rng = _make_rng(seed)
    lines: list[str] = []
    run_demo(rng, write=lines.append)
    return DemoResponse(seed=rng.seed, lines=lines)


def _make_rng(seed: int | None) -> SeededRandom:
    if seed is None:
        return SeededRandom.from_time()
    return SeededRandom(seed)


def _check_count(count: int, config: AppConfig) -> None:
    if count > config.max_count:
        logger.warning("Rejected count %d above limit %d", count, config.max_count)
        raise HTTPException(status_code=400, detail=f"count must not exceed {config.max_count}")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
