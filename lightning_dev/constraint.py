"""
Composer constraint rewriting.

A constraint such as ``^2.8 || ^3.0`` is made of ranges (``^2.8`` and
``^3.0``). The rewriter turns every range into a dev branch constraint
while leaving the separators and whitespace between ranges untouched.

See https://getcomposer.org/doc/articles/versions.md#version-range
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from lightning_dev.policies import resolve_policy
from lightning_dev.transforms import RangeCallback, rewrite_ranges, translate

RANGE_PATTERN = re.compile(r"[0-9a-zA-Z~>=\-<.^*]+")

_OPERATORS = re.compile(r"[^0-9.]+")
_LAST_SEGMENT = re.compile(r"\.[0-9]+$")
_AFTER_FIRST_SEGMENT = re.compile(r"^([0-9]+)\..*")


def extract_ranges(constraint: str) -> Iterator[str]:
    """Yield the constraint's ranges from left to right, one per occurrence."""
    for match in RANGE_PATTERN.finditer(constraint):
        yield match.group(0)


def strip_operators(range_: str) -> str:
    """Return the operator free version of a range, e.g. '^1.3.0' -> '1.3.0'."""
    return _OPERATORS.sub("", range_)


def core_range_to_dev(range_: str) -> str:
    """
    Return the core dev version of a range.

    The operators are removed and the last digits are replaced by
    'x-dev', e.g. '^8.5.3' -> '8.5.x-dev'. A range without a dot has
    no last segment to replace and is only stripped.
    """
    return _LAST_SEGMENT.sub(".x-dev", strip_operators(range_))


def lightning_range_to_dev(range_: str) -> str:
    """
    Return the lightning dev version of a range.

    The operators are removed and only the first digits are kept,
    followed by 'x-dev', e.g. '^1.3.0' -> '1.x-dev'.
    """
    return _AFTER_FIRST_SEGMENT.sub(r"\1.x-dev", strip_operators(range_))


def map_ranges(constraint: str, callback: RangeCallback) -> str:
    """Apply callback to each distinct range and substitute the results."""
    rewrites = rewrite_ranges(extract_ranges(constraint), callback)
    return translate(constraint, rewrites)


@dataclass(frozen=True)
class ComposerConstraint:
    """
    A raw Composer constraint, e.g. '^2.8 || ^3.0'.

    Example:
        >>> ComposerConstraint("8.4.3 || ^8.5.3").get_core_dev()
        '8.4.x-dev || 8.5.x-dev'
        >>> ComposerConstraint("^1.3.0 || ^2.3.0").get_lightning_dev()
        '1.x-dev || 2.x-dev'
    """

    constraint: str

    def ranges(self) -> Iterator[str]:
        """Yield the constraint's ranges from left to right."""
        return extract_ranges(self.constraint)

    def get_core_dev(self) -> str:
        """Return the constraint with every range as a core dev branch."""
        return self.map_ranges(core_range_to_dev)

    def get_lightning_dev(self) -> str:
        """Return the constraint with every range as a lightning dev branch."""
        return self.map_ranges(lightning_range_to_dev)

    def get_dev(self, policy: str | RangeCallback) -> str:
        """
        Return the constraint rewritten with a named or custom policy.

        Args:
            policy: Registered policy name ("core", "lightning", ...) or
                any callable mapping a range to its replacement.

        Raises:
            ValueError: If policy is a name that is not registered.
        """
        return self.map_ranges(resolve_policy(policy))

    def map_ranges(self, callback: RangeCallback) -> str:
        """Return the constraint with callback applied to each distinct range."""
        return map_ranges(self.constraint, callback)

    def __str__(self) -> str:
        return self.constraint


def get_core_dev(constraint: str) -> str:
    return ComposerConstraint(constraint).get_core_dev()


def get_lightning_dev(constraint: str) -> str:
    return ComposerConstraint(constraint).get_lightning_dev()
