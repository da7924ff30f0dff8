"""Subscription plans and the dashboard areas each one unlocks."""
from __future__ import annotations

PLAN_BASIC = "basic"
PLAN_START = "start"
PLAN_PREMIUM = "premium"
PLAN_TYPES = (PLAN_BASIC, PLAN_START, PLAN_PREMIUM)
DEFAULT_PLAN = PLAN_BASIC

# Areas every account can open regardless of plan.
OPEN_VIEWS = {"profile", "adoption", "user-profile", "create-pet"}
START_VIEWS = {"health", "services"}


def normalize_plan(value: str | None) -> str:
    """Map a missing plan to the default; reject unknown names."""
    plan = (value or "").strip().lower()
    if not plan:
        return DEFAULT_PLAN
    if plan not in PLAN_TYPES:
        raise ValueError(f"Plano invalido: {value!r}")
    return plan


def check_plan_access(plan: str | None, view: str) -> bool:
    """Return True when ``plan`` may open the dashboard area ``view``."""
    if view in OPEN_VIEWS:
        return True
    current = (plan or DEFAULT_PLAN).lower()
    if current == PLAN_PREMIUM:
        return True
    if current == PLAN_START:
        return view in START_VIEWS
    return False


def can_enable_dating(plan: str | None) -> bool:
    """Only premium accounts may list a pet for dating."""
    return (plan or "").lower() == PLAN_PREMIUM
