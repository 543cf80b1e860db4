"""
RouteGate - API Gateway

A single ingress point that authenticates callers, resolves route keys to
downstream services and relays requests over REST or an event bus.
"""

__version__ = "0.1.0"
__author__ = "RouteGate Team"
__all__ = ["api", "adapters", "config", "routing", "store", "utils"]
