"""
Helpers package.

Pure utilities shared by every layer. Modules here import only stdlib
and must not import from components, services, persistence or interfaces.
"""
