"""
Hospital Appointment Queue

A console utility for registering patients, logging them in against a
plaintext credential file, and booking appointments into a priority queue
ordered by disease severity and travel time.
"""

__version__ = "1.0.0"
