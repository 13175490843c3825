"""Attendance History package.

Feature modules (users, attendance, reports) with a thin Flask controller
layer on top of service/repository layers. The filtering, classification and
CSV export pipeline is pure and can be used without Flask or a database.
"""
