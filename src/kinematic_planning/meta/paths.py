"""Define path constants allowing access to the project's root."""

from pathlib import Path

KINEMATIC_PLANNING_ROOT = Path(__file__).parent.parent.parent.parent
"""Path to the root directory of `kinematic_planning`."""
