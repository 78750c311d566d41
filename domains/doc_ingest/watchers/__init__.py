"""
Documentation Watchers

- filesystem.py - Watchdog observer re-copying changed README files
"""
