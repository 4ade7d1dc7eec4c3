"""Command line entry points for tempconv."""
