# -*- coding: utf-8 -*-
from __future__ import annotations

import json
import logging
import os
from typing import Dict, Iterable, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

# 同梱のサンプルデータ
DEFAULT_POKEDEX_PATH = os.path.join(os.path.dirname(__file__), "data", "pokemon.json")

THUMBNAIL_URL = (
    "https://s3-ap-northeast-1.amazonaws.com/pokedb.tokyo/sv/assets/pokemon/thumbs/"
    "pokemon-{id:04d}-00.png"
)


class PokedexError(ValueError):
    """図鑑データが読めない・形式が正しくない。"""


class Pokemon(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    jp_name: str = Field(alias="jpName")
    is_final_evolution: bool = Field(default=False, alias="isFinalEvolution")
    is_restricted: bool = Field(default=False, alias="isRestricted")


_POKEMON_LIST = TypeAdapter(List[Pokemon])


def load_pokedex(path: str = DEFAULT_POKEDEX_PATH) -> Tuple[Pokemon, ...]:
    """JSON 配列の図鑑データを読み込む。
    - ファイルがない / JSON でない / 配列でない / 項目が不正 -> PokedexError
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        logger.error("図鑑データを開けません: %s (%s)", path, e)
        raise PokedexError(f"cannot read pokedex file {path}: {e}") from e
    except json.JSONDecodeError as e:
        logger.error("図鑑データが JSON ではありません: %s (%s)", path, e)
        raise PokedexError(f"pokedex file {path} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        logger.error("図鑑データが配列ではありません: %s", path)
        raise PokedexError(f"pokedex file {path} must contain a JSON array")

    try:
        entries = _POKEMON_LIST.validate_python(raw)
    except ValidationError as e:
        logger.error("図鑑データの項目が不正です: %s", path)
        raise PokedexError(f"invalid entry in pokedex file {path}: {e}") from e

    logger.info("図鑑データを読み込みました: %d 件 (%s)", len(entries), path)
    return tuple(entries)


def index_by_id(entries: Iterable[Pokemon]) -> Dict[int, Pokemon]:
    return {p.id: p for p in entries}


def thumbnail_url(pokemon_id: int) -> str:
    """サムネイル画像の URL（図鑑番号は4桁ゼロ埋め）。"""
    return THUMBNAIL_URL.format(id=pokemon_id)
