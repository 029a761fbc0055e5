"""
Core subsystem.

Components:
- errors.py: error hierarchy raised by core operations
- ports.py: Clock / timer protocols injected into the core
- users.py: User model and UserRegistry
- state.py: AppState, the wired-up core
"""
