"""Typed API clients used as introspection fixtures."""
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Coroutine, Dict, List, Optional, Tuple, TypedDict

import typing_extensions
from pydantic import BaseModel, Field


class RequestContext:
    """Cancellation/context carrier."""


class ClientError(Exception):
    pass


@dataclass
class Options:
    region: str = "us-east-1"
    retries: int = 3


@dataclass
class CallSettings:
    """Options bag without a marker in its name."""

    __catalog_role__ = "options"

    timeout: float = 30.0


@dataclass
class Metadata:
    request_id: str = ""


@dataclass
class Widget:
    Name: str
    Size: int


@dataclass
class GetWidgetInput:
    Name: str


@dataclass
class GetWidgetOutput:
    Size: int = field(metadata={"json": "size"})
    ResultMetadata: Metadata = field(default_factory=Metadata)


@dataclass
class ListWidgetsOutput:
    Widgets: List[Widget] = field(default_factory=list, metadata={"json": "widgets"})
    NextToken: Optional[str] = field(default=None, metadata={"json": "nextToken,omitempty"})
    ResultMetadata: Metadata = field(default_factory=Metadata)


@dataclass
class DeleteWidgetInput:
    XID: str = field(metadata={"json": "x_id"})
    Force: bool = False


@dataclass
class DeleteWidgetOutput:
    ResultMetadata: Metadata = field(default_factory=Metadata)
    noSmithyDocumentSerde: bool = False


@dataclass
class TagWidgetInput:
    Name: str
    Tags: Dict[str, str] = field(default_factory=dict)


class CreateWidgetRequest(BaseModel):
    widget_id: str = Field(alias="widgetId")
    label: Optional[str] = None
    tags: Dict[str, str] = {}


class CreateWidgetResponse(BaseModel):
    widget_id: str = Field(serialization_alias="WidgetId")
    created: bool


class DescribeWidgetParams(TypedDict):
    WidgetId: str


class DescribeWidgetResult(TypedDict):
    Widget: Widget
    Found: bool


class WidgetClient:
    """Client with one operation per supported shape."""

    def __init__(self, options: Options):
        self.options = options

    @property
    def region(self) -> str:
        return self.options.region

    @staticmethod
    def from_config(options: Options) -> "WidgetClient":
        return WidgetClient(options)

    def GetWidget(
        self,
        ctx: RequestContext,
        params: Optional[GetWidgetInput],
        *opt_fns: Callable[[Options], None],
    ) -> Tuple[Optional[GetWidgetOutput], Optional[ClientError]]:
        ...

    def ListWidgets(
        self,
        ctx: RequestContext,
        *opt_fns: Callable[[Options], None],
    ) -> Tuple[Optional[ListWidgetsOutput], Optional[ClientError]]:
        ...

    def DeleteWidget(
        self,
        ctx: RequestContext,
        params: Optional[DeleteWidgetInput],
        options: Options,
    ) -> Optional[DeleteWidgetOutput]:
        ...

    def TagWidget(
        self,
        ctx: RequestContext,
        params: TagWidgetInput,
        settings: CallSettings,
    ) -> None:
        ...

    def CreateWidget(self, request: CreateWidgetRequest) -> CreateWidgetResponse:
        ...

    async def describe_widget_async(self, params: DescribeWidgetParams) -> DescribeWidgetResult:
        ...

    def ping(self):
        ...

    def _sign_request(self, request: GetWidgetInput) -> GetWidgetInput:
        ...


@dataclass
class PutWidgetInput:
    Name: str
    Size: int


@dataclass
class EmptyInput:
    pass


class AmbiguousClient:
    """Client whose operation has two payload parameters."""

    def CopyWidget(
        self,
        ctx: RequestContext,
        source: Optional[GetWidgetInput],
        target: Optional[PutWidgetInput],
    ) -> Optional[GetWidgetOutput]:
        ...

    def Touch(self, first: Optional[PutWidgetInput], second: EmptyInput) -> None:
        ...


class LegacyClient:
    """Client with annotations that cannot be resolved."""

    def Broken(self, params: "MissingInput") -> "MissingOutput":  # noqa: F821
        ...

    @classmethod
    def Create(cls, options: Options) -> "LegacyClient":
        ...


class Namespace:
    class NestedClient:
        def Get(self, params: GetWidgetInput) -> None:
            ...


class StubGetWidgetOutput(typing_extensions.TypedDict):
    Size: int
    Label: Optional[str]


class AsyncWidgetClient:
    """Client returning awaitables, as async SDKs annotate them."""

    def GetWidget(self, params: GetWidgetInput) -> Awaitable[GetWidgetOutput]:
        ...

    def GetWidgetCoroutine(
        self, params: GetWidgetInput
    ) -> Coroutine[Any, Any, Tuple[Optional[GetWidgetOutput], Optional[ClientError]]]:
        ...

    def GetWidgetStub(self, params: GetWidgetInput) -> StubGetWidgetOutput:
        ...
