"""Adapters driving the application: CLIs and the web interface."""
