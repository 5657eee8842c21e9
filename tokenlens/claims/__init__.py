"""Payload claim evaluation."""

from .evaluator import ClaimEvaluation, evaluate_claims, format_timestamp, is_expired

__all__ = ["ClaimEvaluation", "evaluate_claims", "format_timestamp", "is_expired"]
