"""Scoring core for WiFi Grader."""
