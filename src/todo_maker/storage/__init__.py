"""File adapters: task file persistence (task_file.py) and CSV export (csv_export.py)."""
