"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (join, heartbeat, evict, create/update/delete message)
- queries/   → Read operations (list participants, visible messages)
- services/  → Orchestration (status notices, eviction sweeper)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
"""
