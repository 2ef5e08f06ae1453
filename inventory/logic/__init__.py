"""Core business logic layer.

Subpackages:
- commands: turning transcripts into parsed intents
- inventory: reconciling intents against the ledger, registering items
- voice: single-shot capture and the transcript pipeline
"""
__all__ = ["commands", "inventory", "voice"]
