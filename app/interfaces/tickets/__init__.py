"""
HTTP interface of the tickets bounded context.
"""
