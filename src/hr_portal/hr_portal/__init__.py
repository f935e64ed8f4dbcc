"""HR Portal package.

Feature modules (employees, timesheets) each ship a model, a repository
interface with a MySQL implementation, a service holding the business rules
and a thin Flask controller.
"""
