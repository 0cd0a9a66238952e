"""
Pytest configuration for lightning-dev tests.

Provides composer.json fixtures and keeps the policy registry isolated
between tests.
"""

import json

import pytest


@pytest.fixture(autouse=True)
def reset_policy_registry():
    """Drop policies registered by a test so they do not leak into others."""
    from lightning_dev import policies

    saved = dict(policies._POLICIES)

    yield  # Run the test

    policies._POLICIES.clear()
    policies._POLICIES.update(saved)


# ========== composer.json Fixture Generators ==========

@pytest.fixture
def composer_data():
    """A Drupal distribution manifest with core and lightning components."""
    return {
        "name": "acquia/lightning",
        "type": "drupal-profile",
        "require": {
            "drupal/core": "~8.5.3 || ^8.6.3",
            "drupal/lightning_api": "^2.7",
            "drupal/lightning_core": "^2.9 || ^3.0",
            "drupal/token": "^1.1",
            "php": ">=7.0.8",
        },
        "require-dev": {
            "drupal/core-dev": "^8.5.3",
            "behat/mink": "1.7.x-dev",
        },
        "extra": {
            "installer-paths": {"docroot/core": ["type:drupal-core"]},
        },
    }


@pytest.fixture
def composer_fixture(tmp_path, composer_data):
    """Create a temporary composer.json file."""
    path = tmp_path / "composer.json"
    path.write_text(json.dumps(composer_data, indent=4) + "\n")
    return path
