"""Graphcool commands."""
