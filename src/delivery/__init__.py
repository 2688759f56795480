"""Delivery lifecycle and live-tracking context."""
