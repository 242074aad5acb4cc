"""Unit tests for ShabdhX.

This package contains test modules for all components of the ShabdhX translator.
Tests use pytest with asyncio support and mock HTTP calls via monkeypatch.
"""
