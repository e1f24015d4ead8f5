"""Payroll Admin package.

This package is organized by feature modules (deductions, allowances, users, ...)
with a thin Flask controller layer over service/repository layers. Records are
owned by a remote REST backend reached through the ``api`` client.
"""
