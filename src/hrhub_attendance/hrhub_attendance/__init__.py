"""HR Hub attendance reporting package.

Feature modules (employees, shifts, punches, attendance, reporting, export)
follow the same layering: plain domain models, repository Protocols with
MySQL implementations, pure services, and a thin Flask controller layer.
"""
