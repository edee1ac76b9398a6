"""Attendance status & performance achievement engine.

Organized by feature modules (attendance, achievement, targets, leaderboard, ...)
with Protocol repositories, service classes and a thin Flask controller layer.
"""
