"""Shared utilities: dates, configuration, logging, files, wiring."""
