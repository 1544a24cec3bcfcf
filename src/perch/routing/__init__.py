"""Routing — ordered, first-match dispatch over (predicate, handler) pairs.

Route entries are built once during setup by the per-method factories
and frozen into an immutable table inside the Router.
"""
