"""
Services layer: long-lived objects wired once by Application.

Services orchestrate components and persistence; interfaces call services only.
"""
