"""Utility helpers for WiFi Grader."""
