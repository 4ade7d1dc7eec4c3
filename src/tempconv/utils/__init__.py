"""Shared helpers for tempconv."""
