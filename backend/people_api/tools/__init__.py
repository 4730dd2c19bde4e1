"""Offline tools — commands that run without starting the HTTP server."""
