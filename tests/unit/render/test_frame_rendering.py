"""Frame composition tests.

Checks pane geometry on several terminal sizes, per-pane content, focus
feedback, and that rendering leaves application data untouched.
"""

from __future__ import annotations

import unittest
from pathlib import Path

from docmanager.render import build_frame, compose_frame, compute_layout
from docmanager.render.ansi import ANSI_ESCAPE_RE, display_width, fit_ansi_line
from docmanager.render.help import help_legend_text
from docmanager.render.highlight import editor_display_lines, sanitize_terminal_text
from docmanager.render.panes import HIGHLIGHT_SYMBOL, recent_log_lines
from docmanager.state import Focus, StatusFlag, new_app_state
from docmanager.ui_theme import DEFAULT_THEME, PLAIN_THEME

ROOT = Path("/srv/site")


def _plain(row: str) -> str:
    return ANSI_ESCAPE_RE.sub("", row)


def _state(count: int = 3):
    entries = [ROOT / "docs" / f"page{n:02d}.md" for n in range(count)]
    return new_app_state(ROOT, entries)


class FrameGeometryTests(unittest.TestCase):
    def test_every_row_fills_the_terminal_width(self) -> None:
        for width, height in ((80, 24), (120, 40), (33, 15), (10, 3), (1, 1), (0, 0)):
            for theme in (PLAIN_THEME, DEFAULT_THEME):
                state = _state()
                state.editor_buffer = "# Title\n\tindented\nline\n"
                rows = build_frame(state, width, height, theme)
                self.assertEqual(len(rows), height, (width, height))
                for row in rows:
                    self.assertEqual(display_width(row), width, (width, height, row))

    def test_layout_bands_cover_the_screen(self) -> None:
        layout = compute_layout(100, 30)

        self.assertEqual(layout.header.height, 3)
        self.assertEqual(layout.log.height, 8)
        self.assertEqual(layout.help.height, 1)
        self.assertEqual(layout.file_list.height, 18)
        self.assertEqual(layout.file_list.width, 30)
        self.assertEqual(layout.editor.width, 70)
        self.assertEqual(layout.editor.col, 30)
        self.assertEqual(layout.help.row, 29)

    def test_small_terminal_shrinks_log_before_middle(self) -> None:
        layout = compute_layout(80, 10)

        self.assertEqual(layout.header.height + layout.file_list.height + layout.log.height + layout.help.height, 10)
        self.assertEqual(layout.file_list.height, 3)
        self.assertEqual(layout.log.height, 3)


class FrameContentTests(unittest.TestCase):
    def test_header_shows_status_and_root(self) -> None:
        state = _state()
        rows = build_frame(state, 100, 24, PLAIN_THEME)

        self.assertIn("Docusaurus Manager | Status: OFFLINE | Path: /srv/site", rows[1])

    def test_header_border_color_follows_status(self) -> None:
        state = _state()
        offline = build_frame(state, 80, 24, DEFAULT_THEME)[0]
        state.status_flag = StatusFlag.RUNNING
        running = build_frame(state, 80, 24, DEFAULT_THEME)[0]

        self.assertTrue(offline.startswith(DEFAULT_THEME.status_offline))
        self.assertTrue(running.startswith(DEFAULT_THEME.status_running))

    def test_selected_file_row_is_marked(self) -> None:
        state = _state()
        state.selected_index = 1
        rows = [_plain(row) for row in build_frame(state, 100, 24, PLAIN_THEME)]

        self.assertIn("Files (Up/Down)", rows[3])
        self.assertIn(f"{HIGHLIGHT_SYMBOL} 📄 page01.md", rows[5])
        self.assertIn("    📄 page00.md", rows[4])

    def test_selected_row_uses_highlight_style(self) -> None:
        state = _state()
        rows = build_frame(state, 100, 24, DEFAULT_THEME)

        self.assertIn(DEFAULT_THEME.list_selected + HIGHLIGHT_SYMBOL, rows[4])

    def test_file_list_scrolls_to_keep_selection_visible(self) -> None:
        state = _state(count=50)
        state.selected_index = 40
        rows = [_plain(row) for row in build_frame(state, 100, 24, PLAIN_THEME)]

        self.assertTrue(any("page40.md" in row for row in rows))
        self.assertGreater(state.file_list_offset, 0)
        self.assertLessEqual(state.file_list_offset, 40)

    def test_editor_title_reflects_focus(self) -> None:
        state = _state()
        unfocused = _plain(build_frame(state, 100, 24, PLAIN_THEME)[3])
        state.focus = Focus.EDITOR
        focused_rows = build_frame(state, 100, 24, DEFAULT_THEME)

        self.assertIn(" Editor ", unfocused)
        self.assertNotIn("Editing Mode", unfocused)
        self.assertIn(" Editor (Editing Mode) ", _plain(focused_rows[3]))
        self.assertIn(DEFAULT_THEME.border_focused + "┌", focused_rows[3])

    def test_editor_shows_buffer_lines(self) -> None:
        state = _state()
        state.editor_buffer = "first line\nsecond line\n"
        rows = [_plain(row) for row in build_frame(state, 100, 24, PLAIN_THEME)]

        self.assertIn("│first line", rows[4])
        self.assertIn("│second line", rows[5])

    def test_log_pane_shows_newest_first(self) -> None:
        state = _state()
        state.log_lines.extend(f"event {n}" for n in range(20))
        rows = [_plain(row) for row in build_frame(state, 80, 24, PLAIN_THEME)]
        log_top = 24 - 1 - 8

        self.assertIn("Console Output", rows[log_top])
        self.assertIn("event 19", rows[log_top + 1])
        self.assertIn("event 18", rows[log_top + 2])

    def test_help_legend_is_the_last_row(self) -> None:
        rows = build_frame(_state(), 120, 24, PLAIN_THEME)

        self.assertEqual(rows[-1].rstrip(), help_legend_text().rstrip())
        self.assertIn("[Ctrl+s]Save", rows[-1])

    def test_render_leaves_application_data_unchanged(self) -> None:
        state = _state(count=5)
        state.log_lines.extend(["a", "b"])
        logs = list(state.log_lines)
        entries = list(state.file_entries)
        flag = state.status_flag
        buffer = state.editor_buffer

        build_frame(state, 80, 24, DEFAULT_THEME)

        self.assertEqual(state.log_lines, logs)
        self.assertEqual(state.file_entries, entries)
        self.assertIs(state.status_flag, flag)
        self.assertEqual(state.editor_buffer, buffer)

    def test_empty_listing_renders_without_selection(self) -> None:
        state = new_app_state(ROOT, [])
        rows = [_plain(row) for row in build_frame(state, 80, 24, PLAIN_THEME)]

        self.assertEqual(len(rows), 24)
        self.assertFalse(any(HIGHLIGHT_SYMBOL in row for row in rows[3:15]))


class SingleLineTextTests(unittest.TestCase):
    def test_newlines_in_file_names_and_log_lines_stay_inside_their_rows(self) -> None:
        root = Path("/srv/a\nsite")
        state = new_app_state(root, [root / "a\nb.md"])
        state.append_log("line1\nline2\rline3")

        rows = build_frame(state, 80, 24, PLAIN_THEME)

        self.assertEqual(len(rows), 24)
        for row in rows:
            self.assertNotIn("\n", row)
            self.assertNotIn("\r", row)
            self.assertEqual(display_width(row), 80)
        plain = [_plain(row) for row in rows]
        self.assertTrue(any("a\\x0ab.md" in row for row in plain))
        self.assertTrue(any("line1\\x0aline2\\x0dline3" in row for row in plain))
        self.assertIn("Path: /srv/a\\x0asite", plain[1])

    def test_single_line_mode_escapes_tabs_and_line_breaks(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\tb\nc", keep_newlines=False), "a\\x09b\\x0ac")
        self.assertEqual(sanitize_terminal_text("a\tb\nc"), "a\tb\nc")


class RenderHelperTests(unittest.TestCase):
    def test_recent_log_lines_keeps_ten_newest_reversed(self) -> None:
        lines = [f"l{n}" for n in range(15)]

        self.assertEqual(recent_log_lines(lines), [f"l{n}" for n in range(14, 4, -1)])
        self.assertEqual(recent_log_lines(lines[:2]), ["l1", "l0"])

    def test_colored_editor_lines_match_plain_text(self) -> None:
        text = "# Heading\n\nSome *text* with `code`.\n\n- item\n"
        colored = editor_display_lines(text, "page.md", color=True)
        plain = editor_display_lines(text, "page.md", color=False)

        self.assertEqual([_plain(line) for line in colored], plain)
        self.assertEqual(plain, ["# Heading", "", "Some *text* with `code`.", "", "- item"])

    def test_control_bytes_are_escaped(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\x1b[2Jb\x07"), "a\\x1b[2Jb\\x07")

    def test_fit_ansi_line_pads_and_clips(self) -> None:
        self.assertEqual(fit_ansi_line("abc", 5), "abc  ")
        self.assertEqual(fit_ansi_line("abcdef", 4), "abcd")
        self.assertEqual(display_width(fit_ansi_line("\033[1mwide 📄\033[0m", 4)), 4)

    def test_compose_frame_homes_cursor_and_joins_rows(self) -> None:
        payload = compose_frame(["one", "two"])

        self.assertTrue(payload.startswith("\033[H"))
        self.assertEqual(payload.count("\r\n"), 1)
        self.assertFalse(payload.endswith("\r\n"))


if __name__ == "__main__":
    unittest.main()
