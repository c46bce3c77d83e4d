"""
Parsers sub-package for xldt-parse.

One module per supported spreadsheet date string format, all built on
the BaseParser ABC in base.py:

- serial.py: SerialParser for day counts since 1899-12-30.
- short_year.py: ShortYearDashParser for ``MM-DD-YY``.
- slash.py: SlashFullYearParser for ``MM/DD/YYYY``.
- dash_datetime.py: DashDateTimeParser for ``YYYY-MM-DD HH:MM:SS``.

The dispatcher (detect.py) tries them in priority order at runtime.
"""
