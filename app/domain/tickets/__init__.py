"""
Tickets bounded context — domain layer.

This module contains all domain logic for the tickets context:
- Tickets and the in-memory store contract
- Request context and credential resolution
- The failure taxonomy shared by every layer
"""
