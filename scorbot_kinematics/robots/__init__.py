"""
Arm geometry and the kinematics engine.

Provides DH link tables for the built-in arms, the engine configuration,
and an immutable engine object bundling forward and inverse kinematics.
"""
