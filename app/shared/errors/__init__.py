"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure, wherever it
happens, reaches the client as the same JSON envelope.
"""
