"""
composer.json rewriting.

Rewrites the constraints of selected packages in a Composer manifest
into dev branch constraints, so a project can be tested against the
development heads of its dependencies.
"""

from __future__ import annotations

import json
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

from lightning_dev.constraint import ComposerConstraint
from lightning_dev.policies import resolve_policy

# Package pattern -> policy; the first matching pattern wins.
DEFAULT_RULES: dict[str, str] = {
    "drupal/core*": "core",
    "drupal/lightning*": "lightning",
    "acquia/lightning": "lightning",
}

DEFAULT_SECTIONS = ("require", "require-dev")


def parse_rule(rule: str) -> tuple[str, str]:
    """Parse a 'PATTERN=POLICY' rule string."""
    pattern, sep, policy = rule.partition("=")
    pattern = pattern.strip()
    policy = policy.strip()
    if not sep or not pattern or not policy:
        raise ValueError(f"Invalid rule: {rule!r}. Expected PATTERN=POLICY")
    return pattern, policy


def is_dev_constraint(constraint: str) -> bool:
    """Return True if constraint already points at a dev branch or stability."""
    return "dev" in constraint.lower()


def match_rule(
    package: str, rules: Mapping[str, str | Callable[[str], str]]
) -> str | Callable[[str], str] | None:
    """Return the policy of the first rule whose pattern matches package."""
    for pattern, policy in rules.items():
        if fnmatchcase(package, pattern):
            return policy
    return None


class ComposerManifest:
    """
    A composer.json document loaded from disk.

    Attributes:
        path: Location of the manifest
        data: Parsed document, key order preserved
        verbose: Verbosity level (0=quiet, 1=summary, 2=per package)
    """

    def __init__(self, path: str | Path, verbose: int = 0):
        self.path = Path(path)
        self.verbose = verbose
        self.data: dict[str, Any] = {}

    def load(self) -> "ComposerManifest":
        if not self.path.exists():
            raise FileNotFoundError(f"{self.path} not found")

        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"{self.path}: expected a JSON object")

        self.data = data
        self._log(2, f"Loaded {self.path}")
        return self

    def section(self, name: str) -> dict[str, str]:
        """Return a requirements section, empty if the manifest lacks it."""
        requirements = self.data.get(name, {})
        if not isinstance(requirements, dict):
            raise ValueError(f"{self.path}: '{name}' must be a JSON object")
        return requirements

    def rewrite(
        self,
        rules: Mapping[str, str | Callable[[str], str]] | None = None,
        sections: Iterable[str] = DEFAULT_SECTIONS,
    ) -> dict[str, tuple[str, str]]:
        """
        Rewrite matching requirements in place.

        Args:
            rules: Package pattern -> policy name or callable. Defaults to
                DEFAULT_RULES.
            sections: Manifest sections to rewrite.

        Returns:
            Mapping of package name to (old constraint, new constraint)
            for every requirement that changed. Constraints that already
            name a dev branch or stability are left alone.

        Raises:
            ValueError: If a rule names an unknown policy, or a section is
                not a JSON object.
        """
        if rules is None:
            rules = DEFAULT_RULES

        # Fail on unknown policies and invalid sections before touching any of them.
        callbacks = {pattern: resolve_policy(policy) for pattern, policy in rules.items()}
        selected = [(name, self.section(name)) for name in sections]

        changes: dict[str, tuple[str, str]] = {}
        for name, requirements in selected:
            for package, constraint in requirements.items():
                callback = match_rule(package, callbacks)
                if callback is None or not isinstance(constraint, str):
                    continue
                if is_dev_constraint(constraint):
                    continue

                new_constraint = ComposerConstraint(constraint).get_dev(callback)
                if new_constraint == constraint:
                    continue

                requirements[package] = new_constraint
                changes[package] = (constraint, new_constraint)
                self._log(2, f"{name}: {package} {constraint} -> {new_constraint}")

        self._log(1, f"Rewrote {len(changes)} constraint(s) in {self.path}")
        return changes

    def dumps(self) -> str:
        """Serialize the manifest the way Composer writes it."""
        return json.dumps(self.data, indent=4, ensure_ascii=False) + "\n"

    def save(self, path: str | Path | None = None) -> Path:
        target = Path(path) if path is not None else self.path
        target.write_text(self.dumps(), encoding="utf-8")
        self._log(1, f"Wrote {target}")
        return target

    def _log(self, level: int, msg: str) -> None:
        """Log message if verbosity is high enough."""
        if self.verbose >= level:
            print(msg)
