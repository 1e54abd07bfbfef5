"""Shared utilities: exceptions, logging configuration and input validation."""
