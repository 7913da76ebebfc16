"""
MDM Management: HTTP transport for the device-management service.

Application package root. Hexagonal layout (ports & adapters).

Bounded contexts:
    - management: DEP device fetch and configuration profile management.

Layers:
    - domain: Entities, ports (ABCs), errors. No framework imports.
    - application: Use cases (endpoints), request/response DTOs, service.
    - infrastructure: Adapters (SQL storage, DEP HTTP client) implementing ports.
    - interfaces: FastAPI routing, request decoders, response encoder.
    - shared: Cross-cutting concerns (errors, request context, logging).
"""
