"""Report generation for JetCycle analysis results."""
