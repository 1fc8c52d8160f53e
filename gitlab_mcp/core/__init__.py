"""Core building blocks shared by the tool handlers."""


from .arguments import (
    author_options,
    get_bool,
    get_int,
    get_list,
    get_string,
    missing,
    parse_int_list,
    require_string,
    split_labels,
)
from .models import (
    BranchSummary,
    CreatedBranch,
    CreatedIssue,
    CreatedMergeRequest,
    FileAction,
    FileChange,
    FileContent,
    IssueSummary,
    MergeRequestSummary,
    ProjectDetails,
    ProjectSummary,
    PushResult,
)

__all__ = [
    # Arguments
    "get_string",
    "get_int",
    "get_bool",
    "get_list",
    "require_string",
    "missing",
    "author_options",
    # List parsers
    "split_labels",
    "parse_int_list",
    # Payload models
    "ProjectSummary",
    "ProjectDetails",
    "IssueSummary",
    "CreatedIssue",
    "MergeRequestSummary",
    "CreatedMergeRequest",
    "FileContent",
    "FileChange",
    "FileAction",
    "PushResult",
    "CreatedBranch",
    "BranchSummary",
]
