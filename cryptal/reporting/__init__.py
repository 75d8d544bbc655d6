"""
cryptal.reporting — Rendering and export of assessment output.

It does NOT compute anything — all inputs are finished assessment models.

Modules:
  formatters — ASCII terminal report for Typer CLI commands.
  export     — JSON serialization and file export.
"""
