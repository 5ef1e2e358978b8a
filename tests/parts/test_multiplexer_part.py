"""Tests for the Multiplexer part."""

import pytest

from pipework.parts.multiplexer import Multiplexer
from pipework.schema.errors import InvalidIdentifierError


class TestMultiplexer:
    def test_impl_forwards_every_input(self):
        part = Multiplexer(inputs=["a", "b"], output="merged")
        impl = part.impl()
        assert "multiplex.Add(2)" in impl
        assert "for v := range a {" in impl
        assert "for v := range b {" in impl
        assert impl.count("merged <- v") == 2
        assert impl.endswith("multiplex.Wait()\nclose(merged)")

    def test_needs_sync(self):
        assert Multiplexer().imports() == ["sync"]

    def test_channels(self):
        part = Multiplexer(inputs=["a", "b"], output="merged")
        assert part.channels() == (["a", "b"], ["merged"])

    def test_update_from_form_dedupes_inputs(self):
        part = Multiplexer()
        part.update({"Input": ["a", " b", "", "a"], "Output": "m"})
        assert part.inputs == ["a", "b"]
        assert part.output == "m"

    def test_bad_input_rejected(self):
        part = Multiplexer(inputs=["a"], output="m")
        with pytest.raises(InvalidIdentifierError):
            part.update({"Input": ["a", "b-c"]})
        assert part.inputs == ["a"]

    def test_no_output(self):
        assert Multiplexer(inputs=["a"]).impl().startswith("//")
