"""
DOMAIN LAYER - Presence and message rules

This layer contains:
- Entities: Participant, Message
- Value Objects: ParticipantName, MessageId, MessageKind
- Ports: Repository interfaces that infrastructure implements
- Services: Pure domain logic (ownership checks, visibility)
- Exceptions: The closed set of domain errors

RULES:
1. NO framework imports (no FastAPI, Redis, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
