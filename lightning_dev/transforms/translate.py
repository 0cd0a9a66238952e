from __future__ import annotations

import re
from typing import Iterable

from lightning_dev.transforms.types import RangeRewrite


def translate(text: str, rewrites: Iterable[RangeRewrite]) -> str:
    """
    Replace every key of the table in a single pass.

    At each position the longest matching key wins and replacement text
    is never scanned again, so a key that also occurs inside another
    key's replacement is left alone. Empty keys are ignored.
    """
    table = {rewrite.old: rewrite.new for rewrite in rewrites if rewrite.old}
    if not table:
        return text

    keys = sorted(table, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: table[match.group(0)], text)
