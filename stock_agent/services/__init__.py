"""Conversation services."""
