"""
Scheduling persistence layer
"""
