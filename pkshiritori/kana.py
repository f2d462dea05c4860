# -*- coding: utf-8 -*-
from __future__ import annotations

import unicodedata
from types import MappingProxyType
from typing import Mapping, Optional

# 長音符
PROLONG_MARK = "ー"

# かなではない文字の読み（ポリゴン2 / ポリゴンZ）
_SPECIAL_CASES: Mapping[str, str] = MappingProxyType({
    "2": "ツー",
    "Z": "ゼット",
})

# ひらがな -> カタカナ 変換
_HIRAGANA_FIRST = 0x3041  # ぁ
_HIRAGANA_LAST = 0x3096  # ゖ
_HIRAGANA_TO_KATAKANA_OFFSET = ord("ァ") - ord("ぁ")

_HIRAGANA_TO_KATAKANA = MappingProxyType({
    code: code + _HIRAGANA_TO_KATAKANA_OFFSET
    for code in range(_HIRAGANA_FIRST, _HIRAGANA_LAST + 1)
})
_ASCII_LOWER = MappingProxyType(str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
))

# 濁点・半濁点 -> 清音（語頭・語尾のみで使う）
_DAKUTEN_TO_BASE: Mapping[str, str] = MappingProxyType({
    "ガ": "カ", "ギ": "キ", "グ": "ク", "ゲ": "ケ", "ゴ": "コ",
    "ザ": "サ", "ジ": "シ", "ズ": "ス", "ゼ": "セ", "ゾ": "ソ",
    "ダ": "タ", "ヂ": "チ", "ヅ": "ツ", "デ": "テ", "ド": "ト",
    "バ": "ハ", "ビ": "ヒ", "ブ": "フ", "ベ": "ヘ", "ボ": "ホ",
    # 半濁点
    "パ": "ハ", "ピ": "ヒ", "プ": "フ", "ペ": "ヘ", "ポ": "ホ",
})

# 結合用の濁点・半濁点（半角の ﾞ ﾟ も NFKC でこれになる）
_SOUND_MARKS = "\u3099\u309a"

# 小さいかな -> 大きいかな 対応表
_SMALL_TO_LARGE: Mapping[str, str] = MappingProxyType({
    "ぁ": "あ", "ぃ": "い", "ぅ": "う", "ぇ": "え", "ぉ": "お",
    "っ": "つ", "ゃ": "や", "ゅ": "ゆ", "ょ": "よ",
    "ゎ": "わ", "ゕ": "か", "ゖ": "け",
    "ァ": "ア", "ィ": "イ", "ゥ": "ウ", "ェ": "エ", "ォ": "オ",
    "ッ": "ツ", "ャ": "ヤ", "ュ": "ユ", "ョ": "ヨ",
    "ヮ": "ワ", "ヵ": "カ", "ヶ": "ケ",
})
_SMALL_TO_LARGE_TABLE = MappingProxyType(str.maketrans(dict(_SMALL_TO_LARGE)))


def to_standard_width(s: str) -> str:
    """半角カナ・全角英数などを NFKC で標準の幅にそろえる。"""
    return unicodedata.normalize("NFKC", s)


def replace_special_cases(s: str) -> str:
    """かなで書かれていない文字を読みに置き換える。
    - 「2」->「ツー」、「Z」->「ゼット」
    - 全角の「２」「Ｚ」も同じ扱い（幅をそろえてから置換）
    - 左から順に、すべての出現を置換
    """
    out = to_standard_width(s)
    for src, reading in _SPECIAL_CASES.items():
        out = out.replace(src, reading)
    return out


def strip_trailing_prolong_mark(s: str) -> str:
    """語尾の長音記号をすべて取り除く（語中・語頭の「ー」は残す）。"""
    return to_standard_width(s).rstrip(PROLONG_MARK)


def to_katakana(s: str) -> str:
    """ひらがなをカタカナへ、英字を小文字へ。その他の文字はそのまま。"""
    return to_standard_width(s).translate(_HIRAGANA_TO_KATAKANA).translate(_ASCII_LOWER)


def strip_edge_dakuten(s: str) -> str:
    """語頭と語尾の濁点・半濁点だけを外す（語中はそのまま）。
    - 語頭・語尾の文字に付いた結合用の濁点・半濁点（U+3099 / U+309A）も落とす
    - 語尾の結合記号を落としたら、その前の長音も落とす
    """
    core = s.lstrip(_SOUND_MARKS)
    trimmed = core.rstrip(_SOUND_MARKS)
    if trimmed != core:
        trimmed = trimmed.rstrip(_SOUND_MARKS + PROLONG_MARK)
    core = trimmed
    if not core:
        return ""
    first = _DAKUTEN_TO_BASE.get(core[0], core[0])
    rest = core[1:].lstrip(_SOUND_MARKS)
    if not rest:
        return first
    last = _DAKUTEN_TO_BASE.get(rest[-1], rest[-1])
    return first + rest[:-1] + last


def expand_small_kana(s: str) -> str:
    """小さいかなを大きいかなにする（位置にかかわらず全部）。
    大きくしたあとで結合用の濁点をもう一度合成する（ゥ゙ -> ヴ）。
    """
    return to_standard_width(to_standard_width(s).translate(_SMALL_TO_LARGE_TABLE))


def normalize(s: str) -> str:
    """しりとり比較用のキーを作る。
    ひらがな/カタカナ・全角/半角・大文字/小文字・語頭語尾の濁点・小さいかな・
    語尾の長音を区別しない形にそろえる。何度かけても結果は変わらない。
    """
    if not s:
        return ""
    out = replace_special_cases(s)
    out = strip_trailing_prolong_mark(out)
    out = to_katakana(out)
    out = strip_edge_dakuten(out)
    return expand_small_kana(out)


def head_char(key: str) -> Optional[str]:
    return key[0] if key else None


def tail_char(key: str) -> Optional[str]:
    return key[-1] if key else None
