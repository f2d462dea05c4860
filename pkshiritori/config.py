# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

from .pokedex import DEFAULT_POKEDEX_PATH
from .shiritori import CHAIN_LENGTH

# .env を読み込む（存在すれば）
load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    pokedex_path: str = DEFAULT_POKEDEX_PATH
    chain_length: int = CHAIN_LENGTH
    log_level: str = "INFO"
    cors_allow_origins: Tuple[str, ...] = ("*",)


class ConfigError(ValueError):
    """環境変数の値が正しくない。"""


def _chain_length_from_env() -> int:
    raw = os.getenv("SHIRITORI_CHAIN_LENGTH", str(CHAIN_LENGTH))
    message = f"SHIRITORI_CHAIN_LENGTH must be a positive integer, got {raw!r}"
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(message) from None
    if value < 1:
        raise ConfigError(message)
    return value


def load_settings() -> Settings:
    origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return Settings(
        pokedex_path=os.getenv("POKEDEX_PATH") or DEFAULT_POKEDEX_PATH,
        chain_length=_chain_length_from_env(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_allow_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
