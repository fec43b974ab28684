"""Jobs: asynchronous bulk operations (imports, exports, verification emails)."""
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from .manager import Manager
from .model import Model, attr, encode_value
from .request import RequestOption


@dataclass
class JobUserExportField(Model):
    name: Optional[str] = None
    # Column name in the export, defaults to ``name``
    export_as: Optional[str] = None


@dataclass
class JobSummary(Model):
    failed: Optional[int] = None
    updated: Optional[int] = None
    inserted: Optional[int] = None
    total: Optional[int] = None


@dataclass
class Job(Model):
    id: Optional[str] = None
    # "pending", "processing", "completed" or "failed"
    status: Optional[str] = None
    type: Optional[str] = None
    created_at: Optional[datetime] = None
    # verification-email jobs
    user_id: Optional[str] = None
    client_id: Optional[str] = None
    # users-exports / users-imports jobs
    connection_id: Optional[str] = None
    # "json" or "csv"
    format: Optional[str] = None
    limit: Optional[int] = None
    fields: Optional[List[JobUserExportField]] = None
    # URL of the exported file once the job completes
    location: Optional[str] = None
    percentage_done: Optional[int] = None
    time_left_seconds: Optional[int] = None
    # Sent as the uploaded file, not as a JSON field
    users: Optional[List[Dict[str, Any]]] = attr(skip=True)
    upsert: Optional[bool] = None
    external_id: Optional[str] = None
    send_completion_email: Optional[bool] = None
    summary: Optional[JobSummary] = None


@dataclass
class JobError(Model):
    user: Optional[Dict[str, Any]] = None
    errors: Optional[List[Dict[str, Any]]] = None


class JobManager(Manager):
    """Start jobs and follow their progress."""

    def read(self, id: str, *opts: RequestOption) -> Job:
        return self.management.request("GET", self._uri("jobs", id), None, *opts, result=Job)

    def verify_email(self, job: Job, *opts: RequestOption) -> Job:
        """Send a verification email to ``job.user_id``."""
        return self.management.request("POST", self._uri("jobs", "verification-email"), job, *opts, result=Job)

    def export_users(self, job: Job, *opts: RequestOption) -> Job:
        return self.management.request("POST", self._uri("jobs", "users-exports"), job, *opts, result=Job)

    def import_users(self, job: Job, *opts: RequestOption) -> Job:
        """Upload ``job.users`` as a JSON file into ``job.connection_id``."""
        form = {key: _form_value(value) for key, value in job.to_dict().items()}
        users = json.dumps(encode_value(job.users or []))
        files = {"users": ("users.json", users, "application/json")}
        return self.management.request(
            "POST", self._uri("jobs", "users-imports"), None, *opts, result=Job, files=files, form=form
        )

    def errors(self, id: str, *opts: RequestOption) -> List[JobError]:
        """Per-user errors of a failed import job."""
        return self.management.request("GET", self._uri("jobs", id, "errors"), None, *opts, result=List[JobError])


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)
