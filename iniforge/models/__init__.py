"""Pydantic models shared across iniforge."""
