"""Committee System package.

This package is organized by feature modules (members, subcommittees,
attendance, payments, ...) with a thin Flask controller layer and
service/repository layers underneath.
"""
