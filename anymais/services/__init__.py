"""
High-level use cases for the AnyMais data layer.

Services orchestrate repositories to implement account rules (login, signup,
profile edits, favorites, plan changes). The HTTP routers call these
services instead of touching the store or the session blob directly.
"""
