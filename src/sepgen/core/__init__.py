"""Core form model, serializer and shared utilities for sepgen."""
