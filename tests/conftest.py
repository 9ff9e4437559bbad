"""Shared test configuration."""

import matplotlib

# Off-screen rendering for the viewer tests
matplotlib.use("Agg")
