"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. For now every adapter is in-process:
the ticket store lives in memory and the request log goes to logging.
"""
