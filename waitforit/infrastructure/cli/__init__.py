"""
Command-line entry for WaitForIt.
"""
