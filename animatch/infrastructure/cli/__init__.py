"""Animatch command line interface."""
