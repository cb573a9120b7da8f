"""
Security package.

Request identity resolution, secure response headers and rate limiting.
"""
