"""Entrypoints (inbound adapters) for ROOMKEEPER.

Expose the application to the outside world: the CLI and the view helpers that
shape results for presentation. Parse and validate inputs, call the message
bus, and present results.

Dependency rule: may import `roomkeeper.service_layer` and
`roomkeeper.bootstrap`; avoid importing `roomkeeper.adapters` directly.
"""
