"""Deterministic view-model derivation for a public court docket."""

__all__ = [
    "config",
    "errors",
    "models",
    "timeutil",
    "countdown",
    "policy_window",
    "claims",
    "votes",
    "normalize",
    "docket",
    "decisions",
    "storage",
    "cli",
]

__version__ = "0.1.0"
