"""Validity checking and path refinement for sampling-based kinematic motion planning."""
