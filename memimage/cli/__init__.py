# CLI package for memimage
"""
Command-line interface for trying out the bank model.

Commands:
    memimage check   — Normalize and validate a bank name
    memimage rename  — Create a bank and rename it
    memimage rules   — List the bank name rules
"""
