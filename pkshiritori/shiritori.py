# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Iterable, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from .kana import head_char, normalize, tail_char, to_katakana
from .pokedex import Pokemon

CHAIN_LENGTH = 6

MSG_TYPE_A_NAME = "ポケモン名を入力してください"
MSG_NO_MATCH = "該当するポケモンが見つかりません"


def is_valid_link(
    previous_name: Optional[str],
    next_name: Optional[str],
    candidate: str,
) -> bool:
    """前後の名前のあいだに candidate を置けるか判定。
    - candidate が空（空白のみ）なら True（空欄は前後の絞り込みを妨げない）
    - 前の名前があれば、その語尾で candidate が始まること
    - 次の名前があれば、その語頭で candidate が終わること
    - 前後がない・空なら、その側の条件はなし
    """
    if not candidate.strip():
        return True
    key = normalize(candidate)

    prev_ok = True
    if previous_name:
        prev_ok = key.startswith(tail_char(normalize(previous_name)) or "")

    next_ok = True
    if next_name:
        next_ok = key.endswith(head_char(normalize(next_name)) or "")

    return prev_ok and next_ok


def _jp_name(p: Optional[Pokemon]) -> Optional[str]:
    return p.jp_name if p is not None else None


def filter_candidates(
    entries: Iterable[Pokemon],
    previous: Optional[Pokemon],
    next_: Optional[Pokemon],
    typed: str = "",
    *,
    final_only: bool = False,
) -> List[Pokemon]:
    """枠に出せるポケモンを図鑑番号順で返す。
    - 使用禁止のポケモンは除外
    - final_only なら最終進化形のみ
    - 前後のポケモンとしりとりがつながること
    - 入力中の文字があれば、その文字で始まること（ひらがな/カタカナ区別なし）
    """
    prefix = to_katakana(typed.strip())
    prev_name = _jp_name(previous)
    next_name = _jp_name(next_)

    out = []
    for p in entries:
        if p.is_restricted:
            continue
        if final_only and not p.is_final_evolution:
            continue
        if not is_valid_link(prev_name, next_name, p.jp_name):
            continue
        if prefix and not to_katakana(p.jp_name).startswith(prefix):
            continue
        out.append(p)
    return sorted(out, key=lambda p: p.id)


class PickerOptions(NamedTuple):
    options: List[Pokemon]
    message: Optional[str]


def picker_options(
    entries: Iterable[Pokemon],
    previous: Optional[Pokemon],
    next_: Optional[Pokemon],
    typed: str = "",
    *,
    final_only: bool = False,
) -> PickerOptions:
    """入力も前後の選択もない枠には候補を出さない（一覧が長くなりすぎるため）。"""
    if not typed.strip() and previous is None and next_ is None:
        return PickerOptions([], MSG_TYPE_A_NAME)
    options = filter_candidates(entries, previous, next_, typed, final_only=final_only)
    return PickerOptions(options, None if options else MSG_NO_MATCH)


def chain_neighbours(
    chain: Sequence[Optional[int]],
    index: int,
    pokedex_by_id: Mapping[int, Pokemon],
) -> Tuple[Optional[Pokemon], Optional[Pokemon]]:
    """index 番目の枠の前後で選ばれているポケモンを返す。
    未選択・図鑑にない番号は None 扱い。
    """
    if not 0 <= index < len(chain):
        raise IndexError(f"slot index {index} out of range 0..{len(chain) - 1}")

    def _at(i: int) -> Optional[Pokemon]:
        if not 0 <= i < len(chain) or chain[i] is None:
            return None
        return pokedex_by_id.get(chain[i])

    return _at(index - 1), _at(index + 1)


def summarize_chain(chain: Sequence[Optional[Pokemon]]) -> str:
    return " → ".join(p.jp_name if p else "？" for p in chain)
