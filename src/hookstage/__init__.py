"""
hookstage - install git hooks and stage project assets.

Components:
- Git root discovery: walk upward to the nearest directory holding .git
- Guarded copy: recursive file/directory copy that stays inside the project
- Hook installer: drop the bundled pre-commit script into .git/hooks
"""

__version__ = "0.1.0"
