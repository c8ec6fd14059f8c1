"""Core: configuration, errors, domain models and contracts.

Nothing in here performs HTTP; adapters do.
"""
