"""Pydantic request/response models for the local HTTP API."""
