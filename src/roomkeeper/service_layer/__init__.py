"""Service layer for ROOMKEEPER.

Implements application use-cases: command handlers, orchestration, and the
typed results they return. Calls domain objects and the outbound ports defined
in `roomkeeper.interfaces`.

Dependency rule: may import `roomkeeper.domain` and `roomkeeper.interfaces`,
but not `roomkeeper.adapters` or `roomkeeper.entrypoints`.
"""
