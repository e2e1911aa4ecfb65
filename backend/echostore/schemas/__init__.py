"""Schemas — Pydantic models for API responses."""
