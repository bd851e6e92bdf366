"""Roll Call package.

Feature modules (users, attendance, roster, messages) each hold a model, a
repository protocol with its MySQL implementation, a service and a thin Flask
controller. ``container.build_container`` wires them together.
"""
