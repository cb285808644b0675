"""Unit tests for cli.output module."""

import json

from src.cli.output import OutputHandler
from src.models.wiki_page import PageNode


class TestOutputHandlerInit:
    """Test cases for OutputHandler initialization."""

    def test_init_default_verbosity_and_color(self):
        """Initialize with default verbosity (0) and color enabled."""
        handler = OutputHandler()

        assert handler.verbosity == 0
        assert handler.console.no_color is False
        assert handler.err_console.stderr is True

    def test_init_no_color_true(self):
        """Initialize with no_color=True disables colors."""
        handler = OutputHandler(no_color=True)

        assert handler.console.no_color is True
        assert handler.err_console.no_color is True


class TestOutputHandlerMessages:
    """Test cases for message routing."""

    def test_results_go_to_stdout(self, capsys):
        """JSON results are written to stdout only."""
        OutputHandler().print_json([{"title": "Home", "order": 0}])

        captured = capsys.readouterr()
        assert json.loads(captured.out) == [{"title": "Home", "order": 0}]
        assert captured.err == ""

    def test_messages_go_to_stderr(self, capsys):
        """Status messages never reach stdout."""
        handler = OutputHandler(verbosity=2)

        handler.success("Page updated")
        handler.error("Failed to get page")
        handler.warning("careful")
        handler.info("info line")
        handler.debug("debug line")

        captured = capsys.readouterr()
        assert captured.out == ""
        for text in ("Page updated", "Failed to get page", "careful", "info line", "debug line"):
            assert text in captured.err

    def test_quiet_verbosity_hides_info_and_debug(self, capsys):
        """Verbosity 0 shows neither info nor debug."""
        handler = OutputHandler(verbosity=0)

        handler.info("info line")
        handler.debug("debug line")

        assert capsys.readouterr().err == ""

    def test_markup_in_messages_is_escaped(self, capsys):
        """Square brackets in messages are printed literally."""
        OutputHandler().error("Invalid argument [wikiId]")

        assert "[wikiId]" in capsys.readouterr().err

    def test_print_tree(self, capsys):
        """Tree output lists titles and paths."""
        roots = [PageNode(id="1", path="/A", title="A", children=[PageNode(id="2", path="/A/B", title="B")])]

        OutputHandler(no_color=True).print_tree(roots, label="wiki1")

        out = capsys.readouterr().out
        assert "wiki1" in out
        assert "A (/A)" in out
        assert "B (/A/B)" in out
