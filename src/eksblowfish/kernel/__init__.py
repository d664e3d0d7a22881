"""Kernel – error hierarchy and ports shared by every layer."""
