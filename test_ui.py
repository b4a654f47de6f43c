from asciimatics.screen import Screen

from ui import CommandLine, frame_lines


def test_frame_lines() -> None:
    assert frame_lines(["ab", "cd"]) == ["+--+", "|ab|", "|cd|", "+--+"]


def test_frame_lines_of_canvas(session) -> None:
    session.execute("line 0 0 4 0")
    lines = frame_lines(session.canvas.rows())
    assert len(lines) == 7
    assert lines[1] == "|*****|"
    assert lines[-1] == "+-----+"


class TestCommandLine:
    def feed_text(self, command_line: CommandLine, text: str) -> None:
        for ch in text:
            assert command_line.feed(ord(ch)) is None

    def test_enter_submits_and_clears(self) -> None:
        command_line = CommandLine()
        self.feed_text(command_line, "undo")
        assert command_line.feed(13) == "undo"
        assert command_line.text == ""
        assert command_line.feed(10) == ""

    def test_backspace(self) -> None:
        command_line = CommandLine()
        self.feed_text(command_line, "chpen ##")
        command_line.feed(Screen.KEY_BACK)
        command_line.feed(127)
        command_line.feed(ord("#"))
        assert command_line.text == "chpen #"

    def test_ignores_control_and_special_keys(self) -> None:
        command_line = CommandLine()
        command_line.feed(Screen.KEY_LEFT)
        command_line.feed(7)
        command_line.feed(ord("q"))
        assert command_line.text == "q"

    def test_stops_one_past_the_limit(self) -> None:
        command_line = CommandLine(max_length=3)
        self.feed_text(command_line, "abcdef")
        assert command_line.text == "abcd"
