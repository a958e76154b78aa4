"""
WaitForIt GUI

Presentation layer and terminal UI for the joke fetcher.
"""
