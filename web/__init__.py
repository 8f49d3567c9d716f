"""Solace web backend."""
