"""
Test suite for the Hospital Appointment Queue.

Contains unit tests for ordering and queue mechanics and scripted
console-session tests.
"""
