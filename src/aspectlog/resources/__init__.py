"""Packaged resource files for aspectlog."""
