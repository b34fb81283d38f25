"""
Forward and inverse kinematics of the 5-DOF arm.

Provides the DH transform chain, the closed-form elbow-up/elbow-down
solver, the forward-kinematics round-trip check, and the result types.
"""
