"""Domain rules that do not depend on storage (plans, record shapes)."""
