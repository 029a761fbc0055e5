"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- earnings.py: completion time -> payout
- task_store.py: in-memory storage keyed by task id
- task_scheduler.py: one-shot deadline checks per assigned task
- lifecycle.py: assign/submit state machine
- task_api.py: operations exposed to the CLI and their result types
"""
