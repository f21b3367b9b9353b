#!/usr/bin/env python3
"""
CLI entry point for flicks.cli module.

This allows running: python -m flicks.cli
"""

from .main import cli

if __name__ == "__main__":
    cli()
