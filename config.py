from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_rate(*keys: str, default: float) -> float:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    rate = float(v)
    if not 0.0 <= rate <= 1.0:
        raise ValueError(f"{keys[0]} must be between 0 and 1, got {v}")
    return rate


@dataclass(frozen=True)
class Settings:
    cafe_name: str
    tax_rate: float
    discount_code: str
    discount_rate: float
    cart_file: str
    status_file: str
    log_dir: str


def load_settings() -> Settings:
    return Settings(
        cafe_name=_get_env("CAFE_NAME", default="Campus Café") or "Campus Café",
        tax_rate=_get_rate("CAFE_TAX_RATE", "TAX_RATE", default=0.095),
        discount_code=_get_env("CAFE_DISCOUNT_CODE", default="STUDENT10") or "STUDENT10",
        discount_rate=_get_rate("CAFE_DISCOUNT_RATE", default=0.10),
        cart_file=_get_env("CAFE_CART_FILE", default="cart.csv") or "cart.csv",
        status_file=_get_env("CAFE_STATUS_FILE", default="discount_status.txt") or "discount_status.txt",
        log_dir=_get_env("CAFE_LOG_DIR", default="data/logs") or "data/logs",
    )
