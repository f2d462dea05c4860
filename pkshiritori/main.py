# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from .config import Settings, configure_logging, load_settings
from .kana import normalize
from .pokedex import Pokemon, index_by_id, load_pokedex, thumbnail_url
from .shiritori import chain_neighbours, is_valid_link, picker_options, summarize_chain

logger = logging.getLogger(__name__)


class NormalizeRequest(BaseModel):
    text: str = ""

class NormalizeResponse(BaseModel):
    text: str
    key: str

class LinkRequest(BaseModel):
    previous: Optional[str] = None
    next: Optional[str] = None
    candidate: str = ""

class LinkResponse(BaseModel):
    valid: bool

class CandidatesRequest(BaseModel):
    chain: List[Optional[int]] = []  # 各枠で選ばれている図鑑番号（未選択は null）
    index: int
    typed: str = ""  # 枠に入力中の文字
    final_only: bool = False

class PokemonOut(BaseModel):
    id: int
    name: str
    jp_name: str
    thumbnail: str

class CandidatesResponse(BaseModel):
    options: List[PokemonOut] = []
    message: Optional[str] = None


def _to_out(p: Pokemon) -> PokemonOut:
    return PokemonOut(id=p.id, name=p.name, jp_name=p.jp_name, thumbnail=thumbnail_url(p.id))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    pokedex = load_pokedex(settings.pokedex_path)
    by_id = index_by_id(pokedex)
    logger.info(
        "起動: 図鑑 %d 件, %d 枠, CORS %s",
        len(pokedex), settings.chain_length, ",".join(settings.cors_allow_origins),
    )

    app = FastAPI(title="ポケモンしりとり")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 静的ファイル（フロント）
    static_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "static")
    if os.path.isdir(static_dir):
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

        @app.get("/")
        def root_index():
            index_path = os.path.join(static_dir, "index.html")
            return FileResponse(index_path)

    @app.post("/api/normalize", response_model=NormalizeResponse)
    def normalize_text(req: NormalizeRequest):
        return NormalizeResponse(text=req.text, key=normalize(req.text))

    @app.post("/api/validate_link", response_model=LinkResponse)
    def validate_link(req: LinkRequest):
        return LinkResponse(valid=is_valid_link(req.previous, req.next, req.candidate))

    @app.post("/api/candidates", response_model=CandidatesResponse)
    def candidates(req: CandidatesRequest):
        chain = req.chain or [None] * settings.chain_length
        if len(chain) != settings.chain_length:
            logger.warning("枠の数が不正: %d", len(chain))
            raise HTTPException(
                status_code=400,
                detail=f"chain must have {settings.chain_length} slots",
            )
        try:
            previous, next_ = chain_neighbours(chain, req.index, by_id)
        except IndexError as e:
            logger.warning("枠の番号が不正: %s", e)
            raise HTTPException(status_code=400, detail=str(e))

        result = picker_options(pokedex, previous, next_, req.typed, final_only=req.final_only)
        if logger.isEnabledFor(logging.DEBUG):
            selected = [by_id.get(i) if i is not None else None for i in chain]
            logger.debug("候補 %d 件: 枠 %d, %s", len(result.options), req.index, summarize_chain(selected))
        return CandidatesResponse(
            options=[_to_out(p) for p in result.options],
            message=result.message,
        )

    @app.get("/api/pokemon/{pokemon_id}", response_model=PokemonOut)
    def get_pokemon(pokemon_id: int):
        p = by_id.get(pokemon_id)
        if p is None:
            raise HTTPException(status_code=404, detail="ポケモンが見つかりません")
        return _to_out(p)

    return app


app = create_app()
