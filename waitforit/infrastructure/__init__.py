"""
WaitForIt Infrastructure Layer

HTTP client, fetcher, actors and logging.
"""
