"""
Shared domain types for hookstage.

Enums provide exhaustiveness checking and prevent stringly-typed errors.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from hookstage.errors import CopyConflictError


class HookName(Enum):
    """Every hook documented in githooks(5)."""

    APPLYPATCH_MSG = "applypatch-msg"
    PRE_APPLYPATCH = "pre-applypatch"
    POST_APPLYPATCH = "post-applypatch"
    PRE_COMMIT = "pre-commit"
    PRE_MERGE_COMMIT = "pre-merge-commit"
    PREPARE_COMMIT_MSG = "prepare-commit-msg"
    COMMIT_MSG = "commit-msg"
    POST_COMMIT = "post-commit"
    PRE_REBASE = "pre-rebase"
    POST_CHECKOUT = "post-checkout"
    POST_MERGE = "post-merge"
    PRE_PUSH = "pre-push"
    PRE_RECEIVE = "pre-receive"
    UPDATE = "update"
    PROC_RECEIVE = "proc-receive"
    POST_RECEIVE = "post-receive"
    POST_UPDATE = "post-update"
    REFERENCE_TRANSACTION = "reference-transaction"
    PUSH_TO_CHECKOUT = "push-to-checkout"
    PRE_AUTO_GC = "pre-auto-gc"
    POST_REWRITE = "post-rewrite"
    SENDEMAIL_VALIDATE = "sendemail-validate"
    FSMONITOR_WATCHMAN = "fsmonitor-watchman"
    P4_CHANGELIST = "p4-changelist"
    P4_PREPARE_CHANGELIST = "p4-prepare-changelist"
    P4_POST_CHANGELIST = "p4-post-changelist"
    P4_PRE_SUBMIT = "p4-pre-submit"
    POST_INDEX_CHANGE = "post-index-change"


def normalize_hooks(hooks: HookName | str | Iterable[HookName | str]) -> list[HookName]:
    """Accept one hook or a sequence of them, as enum members or names."""
    if isinstance(hooks, (HookName, str)):
        hooks = [hooks]
    return [HookName(hook) for hook in hooks]


class CopyStatus(Enum):
    """Result status for file copy operations."""

    COPIED = "copied"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class CopyOptions:
    overwrite: bool = False


@dataclass(frozen=True)
class CopyResult:
    """Result of copying a single file."""

    source: Path
    target: Path
    status: CopyStatus
    error: CopyConflictError | None = None


@dataclass(frozen=True)
class HookInstallResult:
    """Result of installing a single hook."""

    name: HookName
    path: Path
    backup_path: Path | None = None  # Where the previous hook was moved


@dataclass(frozen=True)
class HookState:
    name: HookName
    installed: bool
    managed: bool  # content identical to the bundled template
    has_backup: bool
