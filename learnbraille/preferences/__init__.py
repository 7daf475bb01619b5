from .registry import ENV_VAR, BuzzPattern, PreferenceRepository, get_preferences

__all__ = [
    "BuzzPattern",
    "PreferenceRepository",
    "get_preferences",
    "ENV_VAR",
]
