"""Prompter command-line interface."""
