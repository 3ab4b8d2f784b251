"""Rollover and retention engine."""
