"""Testing – helpers for exercising journal adapters (requires pytest)."""
