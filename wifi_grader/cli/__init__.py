"""Command line interface for WiFi Grader."""
