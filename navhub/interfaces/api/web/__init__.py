"""Navigation API routers, combined in router.py."""
