"""Shared helpers: logging and collaborator command invocation."""
