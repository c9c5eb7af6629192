"""
Permission tree feature.

Turns a user's roles into the per-role {module -> [options]} structure the
client uses to build navigation and guard routes.
"""
