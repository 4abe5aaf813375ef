"""HTTP front end for the audit log parser.

This package provides a Flask application that parses audit lines sent
over HTTP.  It is an **optional** extra; install with::

    pip install auditd-parser[web]

The ``create_app`` factory in ``app.py`` serves three endpoints:

- ``POST /api/parse``: parse one line and return the record as JSON.
- ``GET /api/log``: the diagnostic entries recorded so far.
- ``GET /api/field-types``: the field type each given name resolves to.
"""
