"""Caller identity returned by the connectivity check."""

from __future__ import annotations

from pydantic import BaseModel


class CallerIdentity(BaseModel):
    account: str
    arn: str
    user_id: str = ""
