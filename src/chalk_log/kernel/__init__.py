"""Kernel – error hierarchy and clocks shared by every layer."""
