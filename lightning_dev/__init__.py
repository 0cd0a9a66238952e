"""
lightning-dev: Composer constraint rewriting for dependency testing.

This package turns Composer version constraints into dev branch
constraints, so a Drupal distribution can be tested against the
development heads of core and its own components.

Example usage:
    from lightning_dev import ComposerConstraint

    ComposerConstraint("~8.5.3 || ^8.6.3").get_core_dev()
    # '8.5.x-dev || 8.6.x-dev'
    ComposerConstraint("^1.3.0 || ~2.3.0").get_lightning_dev()
    # '1.x-dev || 2.x-dev'
"""

from lightning_dev.constraint import (
    ComposerConstraint,
    get_core_dev,
    get_lightning_dev,
    map_ranges,
)
from lightning_dev.manifest import ComposerManifest
from lightning_dev.policies import available_policies, get_policy, register_policy

__version__ = "0.1.0"
__all__ = [
    "ComposerConstraint",
    "ComposerManifest",
    "get_core_dev",
    "get_lightning_dev",
    "map_ranges",
    "available_policies",
    "get_policy",
    "register_policy",
]
