"""Unit tests for the translator.

This package contains test modules for all components of the translator.
Tests use pytest with asyncio support; HTTP is either faked per test or served by a local aiohttp test server.
"""
