"""Operator CLI (argparse + rich)."""
