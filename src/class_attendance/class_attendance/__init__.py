"""Class Attendance package.

This package is organized by feature modules (roster, sessions, reports, analytics, ...)
with a thin Flask controller layer and plain service/repository layers.
"""
