"""Attendance sessions backend.

This package is organized by feature modules (students, teachers, sessions,
attendance, reports) with a thin Flask controller layer on top of
service/repository layers. MySQL is the only shared state; every race between
requests and the background sweep is settled by its uniqueness constraints.
"""

__version__ = "0.1.0"
