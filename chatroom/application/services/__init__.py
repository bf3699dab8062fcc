"""
Application services - orchestration that spans several handlers.

- status_announcer.py: records join/leave notices with retry
- eviction_sweeper.py: periodic, single-flight presence eviction
"""
