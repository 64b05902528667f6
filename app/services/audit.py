"""Audit logging helper functions for key domain events.

Standard single-line ``AUDIT key=value`` logs so they are easy to index.
"""
from __future__ import annotations
import logging
from datetime import datetime, UTC
from typing import Optional, Any

_logger = logging.getLogger("app.audit")


def _emit(event: str, user_id: Optional[str] = None, **data: Any):
    payload = {"ts": datetime.now(UTC).isoformat(), "event": event}
    if user_id:
        payload["user_id"] = user_id
    payload.update(data)
    parts = [f"{k}={repr(v)}" for k, v in payload.items()]
    _logger.info("AUDIT " + " ".join(parts))

# Public convenience wrappers

def log_assessment_submit(user_id: str, result_id: str, organization_id: Optional[str], top3: list[str]):
    _emit("assessment.submit", user_id=user_id, result_id=result_id, organization_id=organization_id, top3=top3)

def log_opportunity_change(user_id: str, opportunity_id: str, organization_id: str, action: str):
    _emit(f"opportunity.{action}", user_id=user_id, opportunity_id=opportunity_id, organization_id=organization_id)

def log_match_listing(user_id: str, organization_id: Optional[str], scope: str, returned: int,
                      opportunity_id: Optional[str] = None):
    _emit("matching.list", user_id=user_id, organization_id=organization_id, scope=scope,
          returned=returned, opportunity_id=opportunity_id)

def log_organization_join(user_id: str, organization_id: str):
    _emit("organization.join", user_id=user_id, organization_id=organization_id)
