"""Flet presentation layer."""
