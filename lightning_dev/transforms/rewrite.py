from __future__ import annotations

from typing import Iterable

from lightning_dev.transforms.types import RangeCallback, RangeRewrite


def rewrite_ranges(
    ranges: Iterable[str], callback: RangeCallback
) -> list[RangeRewrite]:
    seen: set[str] = set()
    output: list[RangeRewrite] = []
    for old_range in ranges:
        if old_range in seen:
            continue
        seen.add(old_range)
        output.append(RangeRewrite(old_range, callback(old_range)))
    return output
