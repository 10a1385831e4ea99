"""Pydantic Schemas: request/response validation for API endpoints."""
