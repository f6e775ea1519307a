"""
CLI command implementations.

Architecture:
- Each command builds its own Application via build_application()
  (the CLI runs standalone, not inside the API process)
- Commands call services only; they never touch Database or AQL
- Commands return a process exit status
"""
