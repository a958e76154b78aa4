"""
WaitForIt

Fetches a random developer joke over HTTP and publishes it to UI state.
"""
__version__ = "0.1.0"
