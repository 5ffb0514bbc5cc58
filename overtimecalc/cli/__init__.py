"""Overtime Calc command-line interface."""
