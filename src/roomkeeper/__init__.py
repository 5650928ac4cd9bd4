"""ROOMKEEPER

Shared rooms with participant records. Membership changes go through
validated workflows that load a room, apply the change on the aggregate and
persist it with optimistic concurrency.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
