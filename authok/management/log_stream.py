"""Log streams: export tenant logs to external sinks.

``LogStream.sink`` depends on ``LogStream.type``; decode it with
``LogStream.sink_as``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from .manager import Manager
from .model import M, Model, Variant, attr, decode_variant
from .request import RequestOption

LOG_STREAM_TYPE_AMAZON_EVENTBRIDGE = "eventbridge"
LOG_STREAM_TYPE_AZURE_EVENTGRID = "eventgrid"
LOG_STREAM_TYPE_HTTP = "http"
LOG_STREAM_TYPE_DATADOG = "datadog"
LOG_STREAM_TYPE_SEGMENT = "segment"
LOG_STREAM_TYPE_SPLUNK = "splunk"
LOG_STREAM_TYPE_SUMO = "sumo"
LOG_STREAM_TYPE_MIXPANEL = "mixpanel"


@dataclass
class LogStreamSinkAmazonEventBridge(Model):
    account_id: Optional[str] = attr("awsAccountId")
    region: Optional[str] = attr("awsRegion")
    # Set by the API
    partner_event_source: Optional[str] = attr("awsPartnerEventSource")


@dataclass
class LogStreamSinkAzureEventGrid(Model):
    subscription_id: Optional[str] = attr("azureSubscriptionId")
    region: Optional[str] = attr("azureRegion")
    resource_group: Optional[str] = attr("azureResourceGroup")
    # Set by the API
    partner_topic: Optional[str] = attr("azurePartnerTopic")


@dataclass
class LogStreamSinkHTTP(Model):
    # "JSONLINES", "JSONARRAY" or "JSONOBJECT"
    content_format: Optional[str] = attr("httpContentFormat")
    content_type: Optional[str] = attr("httpContentType")
    endpoint: Optional[str] = attr("httpEndpoint")
    authorization: Optional[str] = attr("httpAuthorization")
    custom_headers: Optional[List[Dict[str, str]]] = attr("httpCustomHeaders")


@dataclass
class LogStreamSinkDatadog(Model):
    region: Optional[str] = attr("datadogRegion")
    api_key: Optional[str] = attr("datadogApiKey")


@dataclass
class LogStreamSinkSegment(Model):
    write_key: Optional[str] = attr("segmentWriteKey")


@dataclass
class LogStreamSinkSplunk(Model):
    domain: Optional[str] = attr("splunkDomain")
    token: Optional[str] = attr("splunkToken")
    port: Optional[str] = attr("splunkPort")
    secure: Optional[bool] = attr("splunkSecure")


@dataclass
class LogStreamSinkSumo(Model):
    source_address: Optional[str] = attr("sumoSourceAddress")


@dataclass
class LogStreamSinkMixpanel(Model):
    region: Optional[str] = attr("mixpanelRegion")
    project_id: Optional[str] = attr("mixpanelProjectId")
    service_account_username: Optional[str] = attr("mixpanelServiceAccountUsername")
    service_account_password: Optional[str] = attr("mixpanelServiceAccountPassword")


@dataclass
class LogStream(Model):
    id: Optional[str] = None
    name: Optional[str] = None
    # One of the LOG_STREAM_TYPE_* constants
    type: Optional[str] = None
    # "active", "paused" or "suspended"
    status: Optional[str] = None
    # Type dependent; see ``sink_as``
    sink: Any = attr(codec=Variant())
    # e.g. [{"type": "category", "name": "auth.login.fail"}]
    filters: Optional[List[Dict[str, str]]] = None

    def sink_as(self, variant: Type[M]) -> Optional[M]:
        """Decode ``sink`` as the given sink type."""
        return decode_variant(variant, self.sink)


class LogStreamManager(Manager):
    """Manage log streams."""

    def create(self, log_stream: LogStream, *opts: RequestOption) -> LogStream:
        return self.management.request("POST", self._uri("log-streams"), log_stream, *opts, result=LogStream)

    def read(self, id: str, *opts: RequestOption) -> LogStream:
        return self.management.request("GET", self._uri("log-streams", id), None, *opts, result=LogStream)

    def update(self, id: str, log_stream: LogStream, *opts: RequestOption) -> LogStream:
        return self.management.request("PATCH", self._uri("log-streams", id), log_stream, *opts, result=LogStream)

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("log-streams", id), None, *opts)

    def list(self, *opts: RequestOption) -> List[LogStream]:
        """List every log stream; the endpoint is not paginated."""
        return self.management.request("GET", self._uri("log-streams"), None, *opts, result=List[LogStream])
