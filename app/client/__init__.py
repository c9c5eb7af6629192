"""
Client-side session for the access admin API.

Persists the login payload (user, token, permission tree) so it survives
restarts, and derives menu and route visibility from it.
"""
