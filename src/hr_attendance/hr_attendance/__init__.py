"""HR Attendance package.

Feature modules (policy, attendance, payroll, ...) keep the time-accounting
rules pure; services fetch from repositories and a thin Flask controller layer
exposes the results.
"""
