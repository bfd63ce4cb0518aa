"""
Shared service utilities.

- http.py - requests.Session factory (default timeout, User-Agent, no retries)
"""
