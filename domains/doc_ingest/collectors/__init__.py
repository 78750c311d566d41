"""
Documentation Collectors

- doc_collector.py - Discovery, copying and full collection runs
"""
