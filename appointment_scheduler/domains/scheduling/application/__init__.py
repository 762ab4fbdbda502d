"""
Scheduling Application Layer

Ports, DTOs, use cases and the scheduler facade.
"""
