"""Typed accessors and wire-format codecs for Envoy/Istio proxy properties."""

__version__ = "0.1.0"