"""Pydantic schemas for the health and version endpoints."""

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str


class VersionInfo(BaseModel):
    version: str
