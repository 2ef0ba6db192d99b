"""Postboard Flet application: reactive state, screens and entry point."""
