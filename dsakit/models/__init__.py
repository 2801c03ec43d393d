"""
Data models for dsakit.

- ModuleRegistration: one topic module and the symbols it publishes
"""
