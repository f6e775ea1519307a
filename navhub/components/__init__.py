"""
Components package.

Domain logic below the service layer. Components may use helpers and
persistence, never services or interfaces.
"""
