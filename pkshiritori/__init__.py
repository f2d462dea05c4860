# -*- coding: utf-8 -*-
from .kana import normalize
from .shiritori import is_valid_link

__all__ = ["normalize", "is_valid_link"]
