"""Adapters (infrastructure) for ROOMKEEPER.

Provide concrete implementations of the ports in `roomkeeper.interfaces`
(in-memory and SQL room stores), plus persistence mapping and related wiring
(engines, metadata, migrations).

Dependency rule: may import `roomkeeper.domain` and `roomkeeper.interfaces`;
neither of those may import this package.
"""
