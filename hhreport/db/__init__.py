"""hhreport database layer.

Provides DuckDB-based storage for the household reporting tables. The
table layout itself is declared in ``hhreport.catalog``; this package
creates it and moves validated records in and out of it.
"""
