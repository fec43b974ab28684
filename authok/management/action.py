"""Actions: custom code bound to triggers of the authentication pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from .manager import Manager
from .model import ListEnvelope, Model
from .request import RequestOption, apply_list_defaults

ACTION_TRIGGER_POST_LOGIN = "post-login"
ACTION_TRIGGER_CLIENT_CREDENTIALS = "credentials-exchange"
ACTION_TRIGGER_PRE_USER_REGISTRATION = "pre-user-registration"
ACTION_TRIGGER_POST_USER_REGISTRATION = "post-user-registration"
ACTION_TRIGGER_POST_CHANGE_PASSWORD = "post-change-password"
ACTION_TRIGGER_SEND_PHONE_MESSAGE = "send-phone-message"


@dataclass
class ActionTrigger(Model):
    id: Optional[str] = None
    version: Optional[str] = None
    status: Optional[str] = None
    runtimes: Optional[List[str]] = None
    default_runtime: Optional[str] = None


@dataclass
class ActionTriggerList(Model):
    triggers: Optional[List[ActionTrigger]] = None


@dataclass
class ActionDependency(Model):
    name: Optional[str] = None
    version: Optional[str] = None
    registry_url: Optional[str] = None


@dataclass
class ActionSecret(Model):
    name: Optional[str] = None
    # Write only, never returned by the API
    value: Optional[str] = None
    updated_at: Optional[datetime] = None


@dataclass
class ActionVersionError(Model):
    id: Optional[str] = None
    msg: Optional[str] = None
    url: Optional[str] = None


@dataclass
class Action(Model):
    id: Optional[str] = None
    name: Optional[str] = None
    supported_triggers: Optional[List[ActionTrigger]] = None
    code: Optional[str] = None
    dependencies: Optional[List[ActionDependency]] = None
    # "node12" or "node16"
    runtime: Optional[str] = None
    secrets: Optional[List[ActionSecret]] = None
    deployed_version: Optional[ActionVersion] = None
    # "pending", "building", "packaged", "built", "retrying" or "failed"
    status: Optional[str] = None
    all_changes_deployed: Optional[bool] = None
    built_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class ActionList(ListEnvelope):
    actions: Optional[List[Action]] = None


@dataclass
class ActionVersion(Model):
    id: Optional[str] = None
    code: Optional[str] = None
    dependencies: Optional[List[ActionDependency]] = None
    deployed: Optional[bool] = None
    status: Optional[str] = None
    number: Optional[int] = None
    errors: Optional[List[ActionVersionError]] = None
    action: Optional[Action] = None
    built_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class ActionVersionList(ListEnvelope):
    versions: Optional[List[ActionVersion]] = None


@dataclass
class ActionBindingReference(Model):
    # "action_id" or "action_name"
    type: Optional[str] = None
    value: Optional[str] = None


@dataclass
class ActionBinding(Model):
    id: Optional[str] = None
    trigger_id: Optional[str] = None
    display_name: Optional[str] = None
    # Only sent when updating bindings
    ref: Optional[ActionBindingReference] = None
    action: Optional[Action] = None
    secrets: Optional[List[ActionSecret]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class ActionBindingList(ListEnvelope):
    bindings: Optional[List[ActionBinding]] = None


@dataclass
class ActionTestPayload(Model):
    payload: Optional[Dict[str, Any]] = None


@dataclass
class ActionExecutionResult(Model):
    action_name: Optional[str] = None
    error: Optional[Dict[str, Any]] = None
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None


@dataclass
class ActionExecution(Model):
    id: Optional[str] = None
    trigger_id: Optional[str] = None
    status: Optional[str] = None
    results: Optional[List[ActionExecutionResult]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ActionManager(Manager):
    """Manage actions, their versions and trigger bindings."""

    def create(self, action: Action, *opts: RequestOption) -> Action:
        return self.management.request("POST", self._uri("actions", "actions"), action, *opts, result=Action)

    def read(self, id: str, *opts: RequestOption) -> Action:
        return self.management.request("GET", self._uri("actions", "actions", id), None, *opts, result=Action)

    def update(self, id: str, action: Action, *opts: RequestOption) -> Action:
        return self.management.request("PATCH", self._uri("actions", "actions", id), action, *opts, result=Action)

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("actions", "actions", id), None, *opts)

    def list(self, *opts: RequestOption) -> ActionList:
        return self.management.request(
            "GET", self._uri("actions", "actions"), None, apply_list_defaults(opts), result=ActionList
        )

    def triggers(self, *opts: RequestOption) -> ActionTriggerList:
        return self.management.request("GET", self._uri("actions", "triggers"), None, *opts, result=ActionTriggerList)

    def bindings(self, trigger_id: str, *opts: RequestOption) -> ActionBindingList:
        return self.management.request(
            "GET", self._uri("actions", "triggers", trigger_id, "bindings"), None, apply_list_defaults(opts),
            result=ActionBindingList,
        )

    def update_bindings(
        self, trigger_id: str, bindings: List[ActionBinding], *opts: RequestOption
    ) -> ActionBindingList:
        """Replace the ordered list of actions bound to a trigger."""
        body = {"bindings": list(bindings)}
        return self.management.request(
            "PATCH", self._uri("actions", "triggers", trigger_id, "bindings"), body, *opts,
            result=ActionBindingList,
        )

    def deploy(self, id: str, *opts: RequestOption) -> ActionVersion:
        """Deploy the latest draft; returns the resulting version."""
        return self.management.request(
            "POST", self._uri("actions", "actions", id, "deploy"), None, *opts, result=ActionVersion
        )

    def test(self, id: str, payload: Dict[str, Any], *opts: RequestOption) -> ActionTestPayload:
        """Run the action against a test event without deploying it."""
        return self.management.request(
            "POST", self._uri("actions", "actions", id, "test"), ActionTestPayload(payload=payload), *opts,
            result=ActionTestPayload,
        )

    def execution(self, id: str, *opts: RequestOption) -> ActionExecution:
        return self.management.request(
            "GET", self._uri("actions", "executions", id), None, *opts, result=ActionExecution
        )

    def versions(self, id: str, *opts: RequestOption) -> ActionVersionList:
        return self.management.request(
            "GET", self._uri("actions", "actions", id, "versions"), None, apply_list_defaults(opts),
            result=ActionVersionList,
        )

    def read_version(self, id: str, version_id: str, *opts: RequestOption) -> ActionVersion:
        return self.management.request(
            "GET", self._uri("actions", "actions", id, "versions", version_id), None, *opts, result=ActionVersion
        )

    def deploy_version(self, id: str, version_id: str, *opts: RequestOption) -> ActionVersion:
        """Roll back to (redeploy) an earlier version."""
        return self.management.request(
            "POST", self._uri("actions", "actions", id, "versions", version_id, "deploy"), None, *opts,
            result=ActionVersion,
        )
