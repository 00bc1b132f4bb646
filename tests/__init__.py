"""Tests for hmrpc."""
