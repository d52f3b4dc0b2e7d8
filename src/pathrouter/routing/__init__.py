"""Routing — template compiler, route table, and list-all matcher.

Routes are registered during setup and published as an immutable
snapshot that request workers read without locking.
"""
