"""Report generation for JetPerf analyses."""
