"""Marche COVID-19 daily reports API."""

__version__ = "1.0.0"
