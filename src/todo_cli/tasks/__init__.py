"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ListMode)
- task_store.py: in-memory collection + identifier allocation
- task_io.py: load/save of the task file in the default format
"""
