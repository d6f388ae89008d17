"""Roster Manager package.

This package is organized by feature modules (employees, analytics, shift logs, ...)
with a thin Flask controller layer over pure aggregation functions and services.
"""
