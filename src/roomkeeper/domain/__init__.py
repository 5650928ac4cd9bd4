"""Domain layer for ROOMKEEPER.

Contains business rules: the Room aggregate, its Participant entities and the
domain errors they raise. This package is deliberately technology-agnostic.

Dependency rule: do not import from `roomkeeper.adapters` or
`roomkeeper.entrypoints`.
"""
