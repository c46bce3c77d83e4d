"""
Transforms sub-package for xldt-parse.

DataFrame-level helpers that apply the string dispatcher to whole
columns of spreadsheet data:

- dates.py: parse_dates() for a Series, parse_date_columns() for a DataFrame.

Reading the workbook itself is left to the caller (pandas, openpyxl, ...);
these functions only ever see cell values.
"""
