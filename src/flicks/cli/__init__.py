"""Operator CLI for flicks."""
