"""Spreadsheet-style editing of pipe tables embedded in Markdown files.

Subpackages / modules:
  tables  -- parse, render, rebuild and edit pipe tables (pure, in-memory)
  files   -- file-tree listing and file read/write around the table core
  config  -- project paths and environment-driven settings
  web     -- FastAPI command layer for an editor frontend
  cli     -- command-line entry point
"""
