"""Core agent logic package.

This package provides:
- DecisionEngine: Per-tick snapshot-to-move pipeline
- DecisionConfig: Configuration for the decision engine
"""

from snakebrain.core.decision import DecisionConfig, DecisionEngine

__all__ = [
    "DecisionConfig",
    "DecisionEngine",
]
