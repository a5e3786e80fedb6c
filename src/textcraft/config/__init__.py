"""Packaged default settings (``default_settings.yaml``)."""
