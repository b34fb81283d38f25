#!/usr/bin/env python3
"""
Main entry point for the ScorBot kinematics engine.

Converts between joint angles and end-effector poses from the command line.
Run directly with ``python run_kinematics.py`` or use the installed
``scorbot-kinematics`` script.

Usage examples::

    # Joint angles to pose
    python run_kinematics.py fk 0 0.5 -0.8 -0.4 0.2

    # Pose to every inverse-kinematic branch
    python run_kinematics.py ik 450 0 500 0 0 --policy all
"""

from __future__ import annotations

import sys

from scorbot_kinematics.cli import main

if __name__ == "__main__":
    sys.exit(main())
