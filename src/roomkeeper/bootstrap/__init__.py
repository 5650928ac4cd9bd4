"""Bootstrap (composition root) for ROOMKEEPER.

Assembles the application at runtime: wires the concrete room store into the
service-layer handlers, builds the message bus, and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `roomkeeper.adapters`, `roomkeeper.service_layer`,
  `roomkeeper.interfaces`, `roomkeeper.domain`, and `roomkeeper.config`.
- Inner layers must not import `roomkeeper.bootstrap`.

No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus, build_room_store

__all__ = ["AppContainer", "bootstrap", "build_message_bus", "build_room_store"]
