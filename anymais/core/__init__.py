"""
Core utilities shared across the AnyMais data layer.

- configuration (env vars, storage paths, seed flag)
- logging setup
- password hashing
- small pure helpers (distance, password strength, e-mail check, ids)
"""
