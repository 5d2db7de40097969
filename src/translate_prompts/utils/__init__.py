"""
Shared utilities for the prompt builders and the CLI.

- language_utils.py: Language tag and display-name resolution
- logging_config.py: Structured JSON logging for CLI runs
"""
