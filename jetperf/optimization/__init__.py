"""Trade-study tools for JetPerf.

Provides one-parameter sweeps over the on-design cycle analysis.
"""
