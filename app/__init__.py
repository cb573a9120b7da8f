"""
TicketDesk — minimal ticket-tracking HTTP service.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - tickets: Login, request identity, ticket create/list/delete.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, authorization gate.
    - shared: Cross-cutting concerns (error mapping, middleware, security, logging).
"""
