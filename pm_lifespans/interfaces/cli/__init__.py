"""Command line interface for pm_lifespans."""
