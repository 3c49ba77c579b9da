"""Tests for linuxbuddy.output.think_filter — think-segment suppression."""

from __future__ import annotations

from linuxbuddy.output.think_filter import (
    THINK_CLOSE,
    THINK_OPEN,
    RenderState,
    ThinkFilter,
)


def _feed_all(think_filter: ThinkFilter, fragments: list[str]) -> str:
    return "".join(think_filter.feed(f) for f in fragments)


class TestRenderState:
    def test_values(self):
        assert RenderState.IDLE == "idle"
        assert RenderState.STREAMING == "streaming"
        assert RenderState.THINKING == "thinking"

    def test_sentinels(self):
        assert THINK_OPEN == "<think>"
        assert THINK_CLOSE == "</think>"


class TestTransitions:
    def test_starts_idle(self, fake_spinner):
        assert ThinkFilter(fake_spinner).state == RenderState.IDLE

    def test_plain_fragment_streams(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        assert tf.feed("hello") == "hello"
        assert tf.state == RenderState.STREAMING
        assert fake_spinner.calls == []

    def test_open_enters_thinking(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        assert tf.feed("<think>") == ""
        assert tf.state == RenderState.THINKING
        assert fake_spinner.calls == ["start"]

    def test_close_returns_to_streaming(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        tf.feed("<think>")
        assert tf.feed("</think>") == ""
        assert tf.state == RenderState.STREAMING
        assert fake_spinner.calls == ["start", "stop"]

    def test_text_inside_segment_suppressed(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        tf.feed("<think>")
        assert tf.feed("secret reasoning") == ""
        assert tf.state == RenderState.THINKING


class TestSuppression:
    def test_think_segment_hidden(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        visible = _feed_all(tf, ["a", "<think>", "b", "c", "</think>", "d"])
        assert visible == "ad"
        assert fake_spinner.starts == 1
        assert fake_spinner.stops == 1

    def test_marker_fragment_discarded_entirely(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        visible = _feed_all(tf, ["before <think>hmm", "x", "done</think> after", "!"])
        assert visible == "!"

    def test_unmatched_close_passes_through(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        assert tf.feed("</think>") == "</think>"
        assert tf.state == RenderState.STREAMING
        assert fake_spinner.calls == []

    def test_open_while_thinking_is_suppressed(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        tf.feed("<think>")
        assert tf.feed("<think>") == ""
        assert fake_spinner.calls == ["start"]

    def test_open_checked_before_close(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        assert tf.feed("<think>short</think>") == ""
        assert tf.state == RenderState.THINKING
        assert fake_spinner.calls == ["start"]

    def test_open_and_close_while_thinking_closes(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        tf.feed("<think>")
        assert tf.feed("<think></think>") == ""
        assert tf.state == RenderState.STREAMING

    def test_multiple_segments(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        visible = _feed_all(
            tf, ["1", "<think>", "x", "</think>", "2", "<think>", "y", "</think>", "3"]
        )
        assert visible == "123"
        assert fake_spinner.starts == 2
        assert fake_spinner.stops == 2

    def test_split_marker_not_detected(self, fake_spinner):
        tf = ThinkFilter(fake_spinner)
        assert _feed_all(tf, ["<thi", "nk>", "x"]) == "<think>x"
        assert fake_spinner.calls == []

    def test_custom_markers(self, fake_spinner):
        tf = ThinkFilter(fake_spinner, open_tag="[[", close_tag="]]")
        assert _feed_all(tf, ["a", "[[", "b", "]]", "<think>"]) == "a<think>"
