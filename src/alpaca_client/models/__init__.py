"""Pydantic models for Alpaca API results."""

from alpaca_client.models.result import ApiResult

__all__ = ["ApiResult"]
