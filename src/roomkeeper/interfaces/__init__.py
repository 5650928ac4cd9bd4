"""Interfaces (application boundary) for ROOMKEEPER.

Defines framework-free application contracts: the ports the service layer
depends on and the errors those ports raise. Business rules stay out of this
package.

Dependency rule: may import `roomkeeper.domain` types for signatures only. It
may be imported by `roomkeeper.service_layer`, `roomkeeper.adapters`, and
`roomkeeper.bootstrap`.
"""
