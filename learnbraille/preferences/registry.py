"""
Preference repository: loads input-feedback preferences from YAML, validates
them, and exposes a read-only query API.

The module singleton is built eagerly at import time from the packaged
defaults, or from the file named by the ``LEARNBRAILLE_PREFERENCES``
environment variable. Call get_preferences() to obtain it. Nothing writes to a
repository after construction; to change a value build a new repository with
``overrides``.

──────────────────────────────────────────────────────────────────────────────
Keys
──────────────────────────────────────────────────────────────────────────────
input_on_fly_check      bool   feedback as soon as the entry becomes correct
correct_buzz_pattern    [int]  vibration pattern for a correct answer
incorrect_buzz_pattern  [int]  vibration pattern for an incorrect answer

Buzz patterns are non-empty lists of non-negative millisecond durations,
alternating off/on and starting with an initial delay.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

import yaml

_DATA_DIR = Path(__file__).parent / "data"
_DEFAULT_PATH = _DATA_DIR / "preferences.yaml"
ENV_VAR = "LEARNBRAILLE_PREFERENCES"

BuzzPattern = tuple[int, ...]

_KEYS = ("input_on_fly_check", "correct_buzz_pattern", "incorrect_buzz_pattern")


class PreferenceRepository:
    """
    Read-only input-feedback preferences.

    Instantiate directly to use a custom file (e.g. in tests); otherwise use
    get_preferences() for the module singleton.
    """

    def __init__(
        self,
        path: Path = _DEFAULT_PATH,
        overrides: Mapping[str, Any] | None = None,
    ) -> None:
        self._path = Path(path)

        # Type annotations only; actual assignment happens in _apply
        self.input_on_fly_check: bool
        self.correct_buzz_pattern: BuzzPattern
        self.incorrect_buzz_pattern: BuzzPattern

        data = self._load_yaml()
        if overrides:
            data.update(overrides)
        self._validate(data)
        self._apply(data)

    def __repr__(self) -> str:
        return (
            f"PreferenceRepository(path={str(self._path)!r}, "
            f"input_on_fly_check={self.input_on_fly_check!r}, "
            f"correct_buzz_pattern={self.correct_buzz_pattern!r}, "
            f"incorrect_buzz_pattern={self.incorrect_buzz_pattern!r})"
        )

    @property
    def path(self) -> Path:
        return self._path

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self) -> dict[str, Any]:
        try:
            with open(self._path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Preferences file not found: {self._path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse preferences file {self._path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Preferences file {self._path} must contain a mapping, got {type(data).__name__}"
            )
        return cast(dict[str, Any], data)

    def _apply(self, data: dict[str, Any]) -> None:
        self.input_on_fly_check = data["input_on_fly_check"]
        self.correct_buzz_pattern = tuple(data["correct_buzz_pattern"])
        self.incorrect_buzz_pattern = tuple(data["incorrect_buzz_pattern"])

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self, data: dict[str, Any]) -> None:
        """Raise ValueError listing every problem found in *data*."""
        errors: list[str] = []
        for key in _KEYS:
            if key not in data:
                errors.append(f"missing key {key!r}")
        unknown = sorted(set(data) - set(_KEYS))
        for key in unknown:
            errors.append(f"unknown key {key!r}")

        if "input_on_fly_check" in data and not isinstance(data["input_on_fly_check"], bool):
            errors.append(
                f"input_on_fly_check must be a bool, got {data['input_on_fly_check']!r}"
            )
        for key in ("correct_buzz_pattern", "incorrect_buzz_pattern"):
            if key in data:
                self._check_pattern(key, data[key], errors)

        if errors:
            raise ValueError(
                f"Invalid preferences in {self._path}:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    @staticmethod
    def _check_pattern(key: str, value: Any, errors: list[str]) -> None:
        if not isinstance(value, (list, tuple)) or not value:
            errors.append(f"{key} must be a non-empty list of durations, got {value!r}")
            return
        for duration in value:
            if isinstance(duration, bool) or not isinstance(duration, int) or duration < 0:
                errors.append(f"{key}: duration must be a non-negative int, got {duration!r}")


# ── Module-level singleton ─────────────────────────────────────────────────────

_preferences: PreferenceRepository = PreferenceRepository(
    Path(os.environ.get(ENV_VAR, _DEFAULT_PATH))
)


def get_preferences() -> PreferenceRepository:
    """Return the module-level preferences singleton."""
    return _preferences
