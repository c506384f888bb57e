"""Plain records of changes handed to the policy/scripting layer."""

from typing import Any, Dict

from copymig.models.change import Change

SCRIPT_FIELDS = ("ref", "author", "message", "first_line_message", "labels")


def to_script_record(change: Change) -> Dict[str, Any]:
    """Expose the fields a migration script may read.

    The labels are copied, so a script mutating the record cannot reach the
    change it came from.
    """
    return {
        "ref": change.reference_string,
        "author": change.author,
        "message": change.message,
        "first_line_message": change.first_line_message,
        "labels": dict(change.labels),
    }


def to_json_record(change: Change) -> Dict[str, Any]:
    """JSON-serializable rendering of a change for the CLI."""
    record = to_script_record(change)
    record["author"] = str(change.author)
    record["date_time"] = change.date_time.isoformat() if change.date_time else None
    record["change_files"] = (
        sorted(change.change_files) if change.change_files is not None else None
    )
    return record
