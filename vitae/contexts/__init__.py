"""Bounded contexts: rendering (external renderer) and publishing (build pipeline)."""
