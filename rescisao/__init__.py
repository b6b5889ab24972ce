"""Rescisão — CLT termination settlement engine."""

from rescisao.settlement.engine import compute, compute_from_payload

__all__ = ["compute", "compute_from_payload"]
