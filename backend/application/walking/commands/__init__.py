"""CQRS Commands for walking domain."""

from .delete_walk import DeleteWalkCommand, DeleteWalkCommandHandler
from .delete_walks import DeleteWalksCommand, DeleteWalksCommandHandler
from .log_walk import LogWalkCommand, LogWalkCommandHandler, LogWalkResult
from .set_step_goal import SetStepGoalCommand, SetStepGoalCommandHandler

__all__ = [
    "LogWalkCommand",
    "LogWalkCommandHandler",
    "LogWalkResult",
    "DeleteWalkCommand",
    "DeleteWalkCommandHandler",
    "DeleteWalksCommand",
    "DeleteWalksCommandHandler",
    "SetStepGoalCommand",
    "SetStepGoalCommandHandler",
]
