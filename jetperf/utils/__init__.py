"""Utility modules for JetPerf."""
