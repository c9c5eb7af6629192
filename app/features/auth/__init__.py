"""
Authentication gateway.

Logs users in either against the local entity store or by delegating to the
external identity authority, and returns the user profile together with the
assembled permission tree.
"""
