"""Utility helpers for videoresolver (configuration and logging)."""
