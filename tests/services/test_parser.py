"""Tests for the wpctl status parser."""

from unittest.mock import MagicMock

import pytest

from sinkpick.models import SinkRecord
from sinkpick.services.parser import (
    MalformedSinkLineError,
    SectionNotFoundError,
    SinkParseError,
    parse_sink_line,
    parse_sinks,
    retrieve_sinks,
    strip_tree_glyphs,
)

TREE_GLYPHS = "├─│└"


class TestStripTreeGlyphs:
    """Tests for strip_tree_glyphs."""

    def test_removes_all_glyphs(self):
        """Every tree glyph is removed, other text is kept."""
        assert strip_tree_glyphs(" ├─ Sinks:\n │  └─ x") == "  Sinks:\n    x"

    def test_plain_text_unchanged(self):
        """Text without glyphs passes through."""
        assert strip_tree_glyphs("47. Speakers [vol: 1.00]") == "47. Speakers [vol: 1.00]"


class TestParseSinkLine:
    """Tests for parse_sink_line."""

    def test_default_sink(self):
        """The default marker is joined directly to the name."""
        record = parse_sink_line("*   47. Built-in Audio Analog Stereo        [vol: 0.40]")

        assert record == SinkRecord("*Built-in Audio Analog Stereo", "47", "vol: 0.40")
        assert record.is_default is True
        assert record.name == "Built-in Audio Analog Stereo"

    def test_non_default_sink(self):
        """Lines without the marker don't start with it."""
        record = parse_sink_line("53. HDMI / DisplayPort 1 Output [vol: 1.00]")

        assert record.display_name == "HDMI / DisplayPort 1 Output"
        assert record.identifier == "53"
        assert record.is_default is False

    def test_missing_index_gives_empty_identifier(self):
        """A line without a numeric index yields an empty identifier."""
        record = parse_sink_line(". Dummy Output [vol: 1.00]")

        assert record.identifier == ""
        assert record.display_name == "Dummy Output"

    def test_brackets_inside_name(self):
        """Only the last bracket field is the volume."""
        record = parse_sink_line("12. Speakers [Front] [vol: 0.30]")

        assert record.display_name == "Speakers [Front]"
        assert record.volume == "vol: 0.30"

    def test_missing_volume_field_is_malformed(self):
        """Lines without the bracket suffix don't match."""
        with pytest.raises(MalformedSinkLineError) as exc_info:
            parse_sink_line("47. Speakers", position=3)

        assert exc_info.value.line == "47. Speakers"
        assert exc_info.value.position == 3
        assert "47. Speakers" in str(exc_info.value)

    def test_missing_index_separator_is_malformed(self):
        """Lines without the "N. " prefix don't match."""
        with pytest.raises(MalformedSinkLineError):
            parse_sink_line("Speakers [vol: 0.50]")


class TestParseSinks:
    """Tests for parse_sinks."""

    def test_parses_all_audio_sinks_in_order(self, wpctl_status, sinks):
        """All sinks of the audio section are returned in order."""
        assert parse_sinks(wpctl_status) == sinks

    def test_video_section_not_included(self, wpctl_status):
        """Sinks listed under Video are never included."""
        names = [sink.display_name for sink in parse_sinks(wpctl_status)]

        assert "Virtual Video Sink" not in names

    def test_minimal_example(self):
        """Header, one sink line and a blank line give one record."""
        raw = "Sinks:\n  * 1. Speakers [vol: 0.50]\n\n"

        assert parse_sinks(raw) == (SinkRecord("*Speakers", "1", "vol: 0.50"),)

    def test_count_matches_lines(self):
        """N sink lines before the blank line give N records."""
        lines = [f"{i}. Sink {i} [vol: 1.00]" for i in range(1, 8)]
        raw = "Sinks:\n" + "\n".join(lines) + "\n\nSources:\n 99. Mic [vol: 1.00]\n"

        result = parse_sinks(raw)

        assert len(result) == 7
        assert [r.identifier for r in result] == [str(i) for i in range(1, 8)]

    def test_empty_section(self):
        """A header directly followed by a blank line gives no records."""
        assert parse_sinks(" ├─ Sinks:\n │  \n ├─ Sources:\n") == ()

    def test_header_at_end_of_output(self):
        """A header on the last line gives no records."""
        assert parse_sinks("Audio\n ├─ Sinks:") == ()

    def test_no_tree_glyphs_in_names(self, wpctl_status):
        """Tree glyphs never leak into display names."""
        for sink in parse_sinks(wpctl_status):
            assert not any(glyph in sink.display_name for glyph in TREE_GLYPHS)

    def test_glyphs_between_marker_and_index(self):
        """Glyphs are removed before matching, wherever they are."""
        raw = "├─ Sinks:\n│  *─  5. Speakers [vol: 0.10]\n│\n"

        assert parse_sinks(raw) == (SinkRecord("*Speakers", "5", "vol: 0.10"),)

    def test_missing_header_raises(self):
        """Output without a sinks section is an error."""
        with pytest.raises(SectionNotFoundError):
            parse_sinks("Audio\n ├─ Devices:\n │  42. Built-in Audio [alsa]\n")

    def test_malformed_line_aborts_parse(self):
        """One bad line fails the whole parse."""
        raw = "Sinks:\n 1. Good [vol: 1.00]\n garbage\n\n"

        with pytest.raises(MalformedSinkLineError) as exc_info:
            parse_sinks(raw)

        assert exc_info.value.position == 2
        assert exc_info.value.line == "garbage"

    def test_errors_share_base_class(self):
        """Both parse errors can be caught as SinkParseError."""
        assert issubclass(SectionNotFoundError, SinkParseError)
        assert issubclass(MalformedSinkLineError, SinkParseError)


class TestRetrieveSinks:
    """Tests for retrieve_sinks."""

    def test_queries_client_and_parses(self, mock_client, sinks):
        """Status output from the client is parsed."""
        assert retrieve_sinks(mock_client) == sinks
        mock_client.status.assert_called_once_with()

    def test_client_errors_propagate(self):
        """Errors from the client are not swallowed."""
        client = MagicMock()
        client.status.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            retrieve_sinks(client)
