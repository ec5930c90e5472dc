#!/usr/bin/env python3
"""Entry point: ``python main.py demo`` runs the sample error chain."""

from errwhat.cli import main

if __name__ == "__main__":
    main()
