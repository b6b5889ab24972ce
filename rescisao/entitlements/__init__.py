"""Entitlement matrix — which line items a termination category is owed."""

from rescisao.entitlements.matrix import ENTITLEMENTS, entitlement_for

__all__ = ["ENTITLEMENTS", "entitlement_for"]
