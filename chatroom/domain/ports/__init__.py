"""
PORTS - Interfaces that infrastructure implements

A port defines WHAT the domain needs from the outside world without
specifying HOW it is done.

Subfolders:
- repositories/  → Document store interfaces (participants, messages)
"""
