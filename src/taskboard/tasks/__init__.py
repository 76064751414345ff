"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Subtask, OpResult, BoardError)
- task_board.py: in-memory board with validated mutations
"""
