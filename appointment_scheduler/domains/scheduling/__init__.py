"""
Scheduling domain: availability, booking and appointment lifecycle.
"""
