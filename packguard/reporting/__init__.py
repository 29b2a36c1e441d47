"""Failure signalling and end-of-run summaries."""
