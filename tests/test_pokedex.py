# -*- coding: utf-8 -*-
import json

import pytest
from pydantic import ValidationError

from pkshiritori.pokedex import (
    Pokemon,
    PokedexError,
    index_by_id,
    load_pokedex,
    thumbnail_url,
)


def _write(tmp_path, data):
    path = tmp_path / "pokemon.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return str(path)


def test_load_uses_json_field_names(tmp_path):
    path = _write(tmp_path, [
        {"id": 25, "name": "Pikachu", "jpName": "ピカチュウ", "isFinalEvolution": False, "isRestricted": False},
        {"id": 150, "name": "Mewtwo", "jpName": "ミュウツー", "isFinalEvolution": True, "isRestricted": True},
    ])
    entries = load_pokedex(path)
    assert isinstance(entries, tuple)
    assert entries[0].jp_name == "ピカチュウ"
    assert not entries[0].is_final_evolution
    assert entries[1].is_restricted


def test_flags_default_to_false(tmp_path):
    path = _write(tmp_path, [{"id": 1, "name": "Bulbasaur", "jpName": "フシギダネ"}])
    (entry,) = load_pokedex(path)
    assert not entry.is_final_evolution
    assert not entry.is_restricted


def test_missing_file(tmp_path):
    with pytest.raises(PokedexError):
        load_pokedex(str(tmp_path / "nope.json"))


def test_not_json(tmp_path):
    with pytest.raises(PokedexError):
        load_pokedex(_write(tmp_path, "{not json"))


def test_not_a_list(tmp_path):
    with pytest.raises(PokedexError):
        load_pokedex(_write(tmp_path, {"id": 1}))


def test_invalid_entry(tmp_path):
    with pytest.raises(PokedexError):
        load_pokedex(_write(tmp_path, [{"id": 1, "name": "Bulbasaur"}]))


def test_pokedex_error_is_value_error():
    assert issubclass(PokedexError, ValueError)


def test_bundled_data_loads():
    entries = load_pokedex()
    by_id = index_by_id(entries)
    assert by_id[233].jp_name == "ポリゴン２"
    assert by_id[474].jp_name == "ポリゴンＺ"
    assert len(by_id) == len(entries)


def test_pokemon_is_frozen():
    p = Pokemon(id=25, name="Pikachu", jp_name="ピカチュウ")
    with pytest.raises(ValidationError):
        p.jp_name = "ライチュウ"


def test_thumbnail_url_zero_pads():
    assert thumbnail_url(25).endswith("/pokemon-0025-00.png")
    assert thumbnail_url(1025).endswith("/pokemon-1025-00.png")
