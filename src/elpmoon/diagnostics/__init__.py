"""Diagnostics scripts (run through ``elpmoon diag <tool>``)."""
