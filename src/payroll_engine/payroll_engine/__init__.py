"""Payroll Engine package.

Attendance classification and payroll reconciliation, organized by feature
modules (shifts, attendance, leaves, payroll, employees) with repository
protocols, a thin Flask controller layer and pure service/calculator layers.
"""
