"""Graphcool command-line interface."""
