"""
CLI tool for turning natural language into shell commands using the Gemini API.

This package asks Google's Gemini API for a shell command matching a plain
language request, streams it to the terminal, and lets the user run, edit,
explain, revise or copy the result.
"""

__version__ = "0.1.0"
