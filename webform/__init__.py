"""Signup form web application.

Serves a five-field HTML form and stores each submission as one row in the
``users`` table of a MySQL database.
"""

__version__ = "0.1.0"
