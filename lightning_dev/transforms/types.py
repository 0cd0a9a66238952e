from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

RangeCallback = Callable[[str], str]


@dataclass(frozen=True)
class RangeRewrite:
    old: str
    new: str
