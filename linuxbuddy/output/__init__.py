"""Terminal output for streamed responses."""

from linuxbuddy.output.renderer import (
    RESPONSE_FOOTER,
    RESPONSE_HEADER,
    ResponseRenderer,
    render_response,
)
from linuxbuddy.output.spinner import Spinner
from linuxbuddy.output.styled import StyledWriter
from linuxbuddy.output.think_filter import (
    THINK_CLOSE,
    THINK_OPEN,
    RenderState,
    ThinkFilter,
)

__all__ = [
    "RESPONSE_FOOTER",
    "RESPONSE_HEADER",
    "THINK_CLOSE",
    "THINK_OPEN",
    "RenderState",
    "ResponseRenderer",
    "Spinner",
    "StyledWriter",
    "ThinkFilter",
    "render_response",
]
