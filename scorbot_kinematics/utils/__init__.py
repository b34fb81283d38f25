"""
Shared constants and helper utilities.

Centralizes the DH convention, built-in link tables, tolerance defaults,
and small stateless helpers used across the scorbot_kinematics package.
"""
