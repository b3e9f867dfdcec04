# -*- coding: utf-8 -*-
"""
Move-selection policies.

A policy is the single integration point between the engine and any strategy: it receives the current board and the
directions that already failed, and returns the next direction.
"""

from .base import FunctionPolicy, Policy, PolicyFunction, as_policy
from .uniform import RandomPolicy

__all__ = ["Policy", "PolicyFunction", "FunctionPolicy", "RandomPolicy", "as_policy"]
