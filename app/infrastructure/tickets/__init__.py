"""
Infrastructure adapters for the tickets bounded context.

Each adapter implements a domain port (ABC).
"""
