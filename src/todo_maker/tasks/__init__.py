"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, StatusFilter) + input validation
- task_store.py: in-memory ordered store with mutation primitives
- task_view.py: filter/search/sort pipeline that produces the displayed order
- task_api.py: small high-level helpers used by the console
"""
