"""Utility functions package."""

from portfolio_backend.utils.responses import error_response, success_response

__all__ = ["error_response", "success_response"]
