"""
Task subsystem.

Components:
- task_models.py: data structures (TaskRecord, TaskStatus) and size limits
- errors.py: recoverable error types
- bounded_stack.py: fixed-capacity LIFO container
- task_board.py: task stack + undo history, index-addressed edit/remove
- task_sort.py: sort by due date / by importance
- task_codec.py: fixed binary file layout + TaskFileStore
- task_api.py: small high-level helpers used by the CLI
"""
