"""
Range policies for lightning-dev.

A policy is a callable that maps one constraint range to its
replacement. Built-in policies are registered lazily on first lookup.
"""

from __future__ import annotations

from typing import Callable

# Registry of available policies
_POLICIES: dict[str, Callable[[str], str]] = {}

BUILTIN_POLICIES = ("core", "lightning")


def register_policy(name: str, callback: Callable[[str], str]) -> None:
    """Register a policy under a case-insensitive name."""
    _POLICIES[name.lower()] = callback


def get_policy(name: str) -> Callable[[str], str] | None:
    """
    Get a policy by name.

    Returns None if no policy is registered under that name.
    """
    name_lower = name.lower()

    if name_lower not in _POLICIES:
        _load_builtin_policy(name_lower)

    return _POLICIES.get(name_lower)


def _load_builtin_policy(name: str) -> None:
    """Try to load a built-in policy by name."""
    if name == "core":
        from lightning_dev.constraint import core_range_to_dev
        _POLICIES["core"] = core_range_to_dev

    elif name == "lightning":
        from lightning_dev.constraint import lightning_range_to_dev
        _POLICIES["lightning"] = lightning_range_to_dev


def available_policies() -> list[str]:
    """Return sorted list of policy names."""
    for name in BUILTIN_POLICIES:
        if name not in _POLICIES:
            _load_builtin_policy(name)

    return sorted(_POLICIES)


def resolve_policy(policy: str | Callable[[str], str]) -> Callable[[str], str]:
    """Return policy itself if callable, else the policy registered under it."""
    if callable(policy):
        return policy

    callback = get_policy(policy)
    if callback is None:
        raise ValueError(
            f"Unknown policy: {policy}. Supported policies: {available_policies()}"
        )
    return callback


__all__ = [
    "register_policy",
    "get_policy",
    "available_policies",
    "resolve_policy",
]
