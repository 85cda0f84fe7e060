"""
Task subsystem.

Components:
- task_models.py: Todo / Deadline / Event variants, datetime formats, rendering
- task_list.py: ordered in-memory collection with 0-based index access
- task_store.py: flat-file codec (` | `-separated records) + TaskFileStore
"""
